"""Unit tests for error reporting."""

import logging

import pandas as pd

from tfdea_forecasting.errors import AnalysisError, ErrorCategory, ErrorState, Outcome


class TestOutcome:
    """Test suite for Outcome."""

    def test_success(self):
        outcome = Outcome([1, 2])

        assert outcome.ok
        assert outcome.error is None

    def test_failure(self, caplog):
        """Test failures carry the sentinel value and log the message."""
        with caplog.at_level(logging.WARNING):
            outcome = Outcome.failure(pd.DataFrame(), ErrorCategory.DATA, "No data")

        assert not outcome.ok
        assert outcome.value.empty
        assert outcome.error.category == ErrorCategory.DATA
        assert str(outcome.error) == "No data"
        assert "No data" in caplog.text


class TestErrorState:
    """Test suite for ErrorState."""

    def test_initially_empty(self):
        state = ErrorState()

        assert state.last is None
        assert state.message is None

    def test_last_error_wins(self):
        """Test a new error overwrites the previous one."""
        state = ErrorState()

        state.set(AnalysisError(category=ErrorCategory.DATA, message="first"))
        state.set(AnalysisError(category=ErrorCategory.MODEL, message="second"))

        assert state.message == "second"
        assert state.last.category == ErrorCategory.MODEL

    def test_consume(self):
        """Test consuming hands the error over once."""
        state = ErrorState()
        state.set(AnalysisError(category=ErrorCategory.DATA, message="gone"))

        assert state.consume().message == "gone"
        assert state.consume() is None

    def test_record(self):
        """Test only failed outcomes change the slot."""
        state = ErrorState()
        failed = Outcome(None, AnalysisError(category=ErrorCategory.DATA, message="bad"))

        assert state.record(failed) is failed
        state.record(Outcome(1))

        assert state.message == "bad"

    def test_clear(self):
        state = ErrorState()
        state.set(AnalysisError(category=ErrorCategory.DATA, message="bad"))

        state.clear()

        assert state.last is None
