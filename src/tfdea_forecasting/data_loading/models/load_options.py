import csv
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class SourceKind(str, Enum):
    """Where a dataset is retrieved from."""

    LOCAL = "local"
    GOOGLE = "google"
    DROPBOX = "dropbox"
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: "str | SourceKind") -> "SourceKind":
        """Map a free-form source name to a kind; unknown names use the default reader."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.DEFAULT


class LoadOptions(BaseModel):
    """
    Pydantic model describing how delimited text is parsed.

    An empty quote character disables quoting entirely, so quote characters inside
    fields are kept as ordinary text.
    """

    has_column_header: bool = Field(
        default=False, description="First line holds the column names"
    )
    has_row_header: bool = Field(
        default=False, description="First column holds unique row names"
    )
    separator: str = Field(default=",", description="Field separator")
    quote_char: str = Field(default="", description="Quote character, empty for none")

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """The separator must be exactly one character."""
        if len(v) != 1:
            raise ValueError(f"Separator must be a single character, got: {v!r}")
        return v

    @field_validator("quote_char")
    @classmethod
    def validate_quote_char(cls, v: str | None) -> str:
        """The quote character must be empty or a single character."""
        v = v or ""
        if len(v) > 1:
            raise ValueError(f"Quote character must be a single character, got: {v!r}")
        return v

    def to_read_csv_params(self) -> dict[str, Any]:
        """
        Convert the options to parameters suitable for pandas.read_csv.

        Returns:
            dict: Keyword arguments for pandas.read_csv()
        """
        params: dict[str, Any] = {
            "sep": self.separator,
            "header": 0 if self.has_column_header else None,
        }
        if self.quote_char:
            params["quotechar"] = self.quote_char
        else:
            params["quoting"] = csv.QUOTE_NONE
        return params
