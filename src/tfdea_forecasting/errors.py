"""
Error reporting shared by the loader, the column selector and both forecast pipelines.

Failures are never raised past the public functions. They are converted into a single
human readable `AnalysisError` and returned inside an `Outcome` together with a sentinel
value (empty DataFrame, empty list or None). A session keeps the most recent error in
its own `ErrorState`.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorCategory(str, Enum):
    """Kinds of failures reported to the user."""

    SELECTION = "selection"  # no input/output columns chosen, invalid options
    DATA = "data"  # empty data, duplicated row names, missing columns
    RETRIEVAL = "retrieval"  # malformed link, network or parse failure
    MODEL = "model"  # solver or linear model failure


class AnalysisError(BaseModel):
    """A single human readable failure."""

    category: ErrorCategory = Field(description="Failure category")
    message: str = Field(description="Message shown to the user")

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Value returned by every loader and pipeline call.

    On failure `value` holds the sentinel for its type and `error` describes what
    went wrong. Callers check `ok` (or the emptiness of `value`) instead of catching
    exceptions.
    """

    value: T
    error: AnalysisError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, value: Any, category: ErrorCategory, message: str) -> "Outcome":
        """Build a failed outcome and log the message."""
        logger.warning(message)
        return cls(value=value, error=AnalysisError(category=category, message=message))


class ErrorState:
    """
    The "last error" slot of one session.

    Each new error overwrites the previous one; errors are never accumulated.
    """

    def __init__(self) -> None:
        self._last: AnalysisError | None = None

    @property
    def last(self) -> AnalysisError | None:
        return self._last

    @property
    def message(self) -> str | None:
        return self._last.message if self._last else None

    def set(self, error: AnalysisError) -> None:
        self._last = error

    def clear(self) -> None:
        self._last = None

    def consume(self) -> AnalysisError | None:
        """Hand the last error to the presentation layer and empty the slot."""
        error, self._last = self._last, None
        return error

    def record(self, outcome: Outcome) -> Outcome:
        """Store the outcome's error, if any, and hand the outcome back."""
        if outcome.error is not None:
            self.set(outcome.error)
        return outcome
