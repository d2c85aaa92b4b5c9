from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReturnsToScale(str, Enum):
    VRS = "vrs"
    CRS = "crs"
    DRS = "drs"
    IRS = "irs"


class Orientation(str, Enum):
    INPUT = "in"
    OUTPUT = "out"


class SecondaryObjective(str, Enum):
    MIN = "min"
    MAX = "max"


class FrontierType(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


_ORIENTATION_ALIASES = {"input": "in", "output": "out"}


class TFDEAParameters(BaseModel):
    """
    Pydantic model for the TFDEA model options.

    Free-form option strings are validated here, so the solver only ever receives
    one of the enumerated values.
    """

    model_config = ConfigDict(frozen=True)

    rts: ReturnsToScale = Field(default=ReturnsToScale.VRS, description="Returns to scale")
    orientation: Orientation = Field(
        default=Orientation.OUTPUT, description="Input or output orientation"
    )
    secondary_obj: SecondaryObjective = Field(
        default=SecondaryObjective.MIN, description="Secondary objective on the lambdas"
    )
    frontier_type: FrontierType = Field(
        default=FrontierType.STATIC, description="Static or dynamic frontier"
    )
    segmented_roc: bool = Field(default=False, description="Use segmented rate of change")

    @field_validator("rts", "secondary_obj", "frontier_type", mode="before")
    @classmethod
    def normalize_case(cls, v: Any) -> Any:
        """Accept upper or mixed case option names."""
        return v.lower() if isinstance(v, str) else v

    @field_validator("orientation", mode="before")
    @classmethod
    def normalize_orientation(cls, v: Any) -> Any:
        """Accept 'input'/'output' as well as 'in'/'out'."""
        if isinstance(v, str):
            v = v.lower()
            return _ORIENTATION_ALIASES.get(v, v)
        return v

    def to_model_row(self) -> dict[str, Any]:
        """Option values as they are echoed in the model table."""
        return {
            "rts": self.rts.value,
            "orientation": self.orientation.value,
            "secondary_obj": self.secondary_obj.value,
            "frontier_type": self.frontier_type.value,
            "segmented_roc": self.segmented_roc,
        }
