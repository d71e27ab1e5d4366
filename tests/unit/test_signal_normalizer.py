"""Unit tests for the signal payload normalizer."""

import pytest

from traderedge_app.data.signal_normalizer import SignalNormalizer


class TestSignalNormalizer:
    """Test suite for the SignalNormalizer class."""

    def test_normalize_feed_payload(self, sample_raw_signal) -> None:
        """Test normalizing a signals feed payload with string prices."""
        result = SignalNormalizer().normalize(sample_raw_signal)

        assert result.success is True
        assert result.error_msg is None
        signal = result.signal
        assert signal.symbol == "EUR/USD"
        assert signal.entry_price == 1.0845
        assert signal.stop_loss == 1.0875
        assert signal.take_profit == 1.0785  # first target of the list
        assert signal.direction == "SELL"

    def test_snake_case_aliases(self) -> None:
        """Test the snake_case field names used by bot signals."""
        result = SignalNormalizer().normalize({
            "symbol": "BTCUSDT",
            "entry_price": 67450,
            "stop_loss": 66800,
            "take_profit": 68750,
            "direction": "long",
        })

        signal = result.signal
        assert signal.symbol == "BTCUSDT"
        assert signal.entry_price == 67450.0
        assert signal.stop_loss == 66800.0
        assert signal.take_profit == 68750.0
        assert signal.direction == "BUY"

    def test_falsy_alias_falls_through(self) -> None:
        """Test that a zero under one alias defers to the next alias."""
        result = SignalNormalizer().normalize({
            "pair": "",
            "symbol": "GBPUSD",
            "entry": 0,
            "entryPrice": "1.2650",
            "stopLoss": None,
            "stop_loss": 1.2600,
        })

        signal = result.signal
        assert signal.symbol == "GBPUSD"
        assert signal.entry_price == 1.2650
        assert signal.stop_loss == 1.2600

    def test_default_symbol(self) -> None:
        result = SignalNormalizer().normalize({"entry": 1.1, "stopLoss": 1.09})
        assert result.signal.symbol == "EURUSD"

    def test_missing_prices_are_not_an_error(self) -> None:
        """Test that missing prices normalize to zero for the calculator to reject."""
        result = SignalNormalizer().normalize({"pair": "EURUSD", "entry": "n/a"})

        assert result.success is True
        assert result.signal.entry_price == 0.0
        assert result.signal.stop_loss == 0.0
        assert result.signal.has_valid_prices is False

    def test_empty_target_list(self) -> None:
        result = SignalNormalizer().normalize({"entry": 1.1, "stopLoss": 1.09, "takeProfit": []})
        assert result.signal.take_profit == 0.0

    def test_unknown_direction(self) -> None:
        result = SignalNormalizer().normalize({"entry": 1.1, "stopLoss": 1.09, "direction": "flat"})
        assert result.signal.direction is None

    @pytest.mark.parametrize("payload", [None, "EURUSD", ["entry", 1.1]])
    def test_non_mapping_payload(self, payload) -> None:
        result = SignalNormalizer().normalize(payload)
        assert result.success is False
        assert "must be a mapping" in result.error_msg

    def test_non_string_symbol(self) -> None:
        result = SignalNormalizer().normalize({"pair": 12345, "entry": 1.1, "stopLoss": 1.09})
        assert result.success is False
        assert "Invalid symbol" in result.error_msg
