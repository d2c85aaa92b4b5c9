"""
Centralized configuration management for the technology forecasting application.

This module provides type-safe configuration classes using Pydantic for all components
of the system: data loading and forecasting.
"""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class DataLoadingConfig(BaseModel):
    """Configuration for data loading."""

    default_separator: str = ","
    default_quote_char: str = ""

    separator_options: dict[str, str] = Field(
        default={"Comma": ",", "Semicolon": ";", "Tab": "\t"}
    )
    quote_options: dict[str, str] = Field(
        default={"None": "", "Single Quote": "'", "Double Quote": '"'}
    )

    accepted_file_types: list[str] = Field(
        default=[".csv", "text/csv", "text/comma-separated-values", "text/plain"]
    )
    accepted_extensions: list[str] = Field(default=[".csv", ".txt"])

    # Use environment variable for the upload limit:
    max_upload_bytes: int = Field(
        default=int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024**2))),
        description="Maximum size of an uploaded data file (10MB by default)",
        gt=0,
    )

    spreadsheet_export_url: str = "https://spreadsheets.google.com/tq"
    spreadsheet_select_query: str = Field(
        default="select * where A!=''",
        description="Query selecting rows of data where column A is not empty",
    )


class ForecastConfig(BaseModel):
    """Configuration for the TFDEA and linear regression forecasts."""

    constant_column: str = "Constant_1"

    rts: str = "vrs"
    orientation: str = "out"
    secondary_obj: str = "min"
    frontier_type: str = "static"
    segmented_roc: bool = False

    tolerance: float = Field(
        default=1e-6,
        description="Tolerance when comparing efficiency scores to 1",
        gt=0.0,
    )

    @property
    def orientation_options(self) -> dict[str, str]:
        """Orientation labels shown to users."""
        return {"Output": "out", "Input": "in"}

    @property
    def rts_options(self) -> dict[str, str]:
        """Returns to scale labels shown to users."""
        return {
            "Variable Returns to Scale": "vrs",
            "Constant Returns to Scale": "crs",
            "Decreasing Returns to Scale": "drs",
            "Increasing Returns to Scale": "irs",
        }

    @property
    def frontier_type_options(self) -> dict[str, str]:
        """Frontier type labels shown to users."""
        return {"Static": "static", "Dynamic": "dynamic"}

    @property
    def secondary_obj_options(self) -> dict[str, str]:
        """Secondary objective labels shown to users."""
        return {"Min": "min", "Max": "max"}

    @property
    def as_dict(self) -> dict[str, Any]:
        """Default TFDEA parameters as a dictionary for easy unpacking."""
        return {
            "rts": self.rts,
            "orientation": self.orientation,
            "secondary_obj": self.secondary_obj,
            "frontier_type": self.frontier_type,
            "segmented_roc": self.segmented_roc,
        }


def _env_list(name: str) -> list[str]:
    value = os.getenv(name, "")
    return [item.strip() for item in value.split(",") if item.strip()]


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "y")


class BatchForecastConfig(BaseModel):
    """Settings of one batch forecast run, read from the environment."""

    # Environment values are strings; validate them like explicit arguments
    model_config = ConfigDict(validate_default=True)

    data_file: str | None = Field(default_factory=lambda: os.getenv("DATA_FILE") or None)
    source_kind: str = Field(default_factory=lambda: os.getenv("SOURCE_KIND", "local"))
    has_column_header: bool = Field(
        default_factory=lambda: _env_flag("HAS_COLUMN_HEADER", True)
    )
    has_row_header: bool = Field(default_factory=lambda: _env_flag("HAS_ROW_HEADER", False))
    separator: str = Field(default_factory=lambda: os.getenv("SEPARATOR", ","))
    quote_char: str = Field(default_factory=lambda: os.getenv("QUOTE_CHAR", ""))

    method: str = Field(default_factory=lambda: os.getenv("METHOD", "tfdea").lower())
    inputs: list[str] = Field(default_factory=lambda: _env_list("INPUTS"))
    outputs: list[str] = Field(default_factory=lambda: _env_list("OUTPUTS"))
    intro_date: str | None = Field(default_factory=lambda: os.getenv("INTRO_DATE") or None)
    frontier_date: float | None = Field(
        default_factory=lambda: os.getenv("FRONTIER_DATE") or None
    )

    rts: str | None = Field(default_factory=lambda: os.getenv("RTS") or None)
    orientation: str | None = Field(default_factory=lambda: os.getenv("ORIENTATION") or None)
    secondary_obj: str | None = Field(
        default_factory=lambda: os.getenv("SECONDARY_OBJ") or None
    )
    frontier_type: str | None = Field(
        default_factory=lambda: os.getenv("FRONTIER_TYPE") or None
    )
    segmented_roc: bool = Field(default_factory=lambda: _env_flag("SEGMENTED_ROC", False))

    @field_validator("method")
    @classmethod
    def validate_method(cls, v: str) -> str:
        """Only TFDEA and linear regression forecasts exist."""
        if v not in ("tfdea", "lr"):
            raise ValueError(f"METHOD must be 'tfdea' or 'lr', got: {v}")
        return v

    @property
    def tfdea_params(self) -> dict[str, Any]:
        """TFDEA options given in the environment, for easy unpacking."""
        params: dict[str, Any] = {"segmented_roc": self.segmented_roc}
        for name in ("rts", "orientation", "secondary_obj", "frontier_type"):
            value = getattr(self, name)
            if value is not None:
                params[name] = value
        return params


class AppConfig(BaseModel):
    """Main application configuration."""

    base_data_path: str | None = Field(
        default=None, description="Local directory for the results workbook"
    )

    data_loading: DataLoadingConfig = Field(default_factory=DataLoadingConfig)
    forecast: ForecastConfig = Field(default_factory=ForecastConfig)

    results_file: str = os.getenv("RESULTS_FILE", "forecast_results.xlsx")
    results_path: str | None = Field(
        default=None, description="Path for the exported results workbook"
    )

    def _join_path(self, base: str, filename: str) -> str:
        """
        Join a local directory and a file name with forward slashes.

        Args:
            base: Local directory
            filename: Filename to append

        Returns:
            Joined path
        """
        if not base:
            return filename

        joined = os.path.join(base, filename)
        return joined.replace("\\", "/")

    @field_validator("base_data_path", mode="before")
    @classmethod
    def validate_base_data_path(cls, v: Any) -> str | None:
        """Load base data path from environment if not provided."""
        if v is None or v == "":
            env_val = os.environ.get("BASE_DATA_PATH")
            return env_val if env_val else None
        return str(v)

    @model_validator(mode="after")
    def validate_paths(self) -> "AppConfig":
        """Handle environment variables and construct file paths."""
        if self.base_data_path is None:
            env_base = os.environ.get("BASE_DATA_PATH")
            if env_base:
                self.base_data_path = env_base

        # The workbook is written with pathlib, so only local directories work
        if self.base_data_path and "://" in self.base_data_path:
            raise ValueError(
                f"BASE_DATA_PATH must be a local directory, got: {self.base_data_path}"
            )

        if self.base_data_path and not self.results_path:
            self.results_path = self._join_path(self.base_data_path, self.results_file)

        return self


# Global configuration instance
config = AppConfig()
