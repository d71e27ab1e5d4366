"""
Error handling tests for the position sizing engine.

Tests cover the error hierarchy, the never-raise contract of the calculator
and the places where errors are deliberately raised.
"""

import pytest

from traderedge_app.data.models import RiskProfile, Signal
from traderedge_app.errors import (
    ConfigurationError,
    DataQualityError,
    InvalidTradeParametersError,
    MalformedDataError,
    SystemFailureError,
)
from traderedge_app.sizing.calculator import PositionSizeCalculator
from traderedge_app.sizing.pnl import calculate_lot_breakdown


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        """Test that data quality errors are recoverable."""
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        invalid = InvalidTradeParametersError("bad trade", missing_fields=["stop_loss"], symbol="EURUSD")
        assert isinstance(invalid, DataQualityError)
        assert invalid.missing_fields == ["stop_loss"]
        assert invalid.symbol == "EURUSD"

        malformed = MalformedDataError("bad yaml", raw_data="x: [", expected_format="yaml",
                                       context={"path": "profile.yaml"})
        assert malformed.expected_format == "yaml"
        assert malformed.context == {"path": "profile.yaml"}

    def test_system_failure_error_hierarchy(self):
        """Test that configuration errors are unrecoverable."""
        error = ConfigurationError("bad config", source="profile.yaml", errors=["e"])
        assert isinstance(error, SystemFailureError)
        assert error.recoverable is False
        assert error.source == "profile.yaml"
        assert error.errors == ["e"]


class TestCalculatorNeverRaises:
    """Test that bad trade input degrades to an invalid outcome."""

    @pytest.mark.parametrize("signal", [
        Signal("EURUSD", 0.0, 0.0),
        Signal("BTCUSD", 67450.0, 0.0),
        Signal("ESZ4", 0.0, 4990.0),
        Signal("EURUSD", 1.1, 1.1),
        Signal("", 1.1, 1.09),
    ])
    def test_no_exceptions(self, signal):
        outcome = PositionSizeCalculator().calculate(signal, RiskProfile())
        assert outcome.success in (True, False)

    def test_invalid_outcome_cannot_be_unwrapped_silently(self):
        outcome = PositionSizeCalculator().calculate(Signal("EURUSD", 0.0, 1.09), RiskProfile())
        with pytest.raises(InvalidTradeParametersError):
            outcome.unwrap()


class TestRaisingHelpers:
    """Test helpers that raise on bad input."""

    def test_lot_breakdown_rejects_zero_stop(self):
        with pytest.raises(InvalidTradeParametersError) as exc_info:
            calculate_lot_breakdown(10000, 1, -5, "EURUSD")
        assert exc_info.value.symbol == "EURUSD"
