"""Tests for instrument classification"""

import pytest

from traderedge_app.data.models import InstrumentType
from traderedge_app.sizing.instruments import detect_instrument_type, normalize_symbol


class TestDetectInstrumentType:
    """Test symbol classification"""

    @pytest.mark.parametrize("symbol", [
        "BTCUSD", "ETHUSDT", "SOL/USD", "XRPUSD", "DOGEUSD", "ADAUSD", "BNBUSDT", "btc-perp",
    ])
    def test_crypto_keywords(self, symbol):
        """Symbols containing a crypto keyword are crypto"""
        assert detect_instrument_type(symbol) is InstrumentType.CRYPTO

    @pytest.mark.parametrize("symbol", [
        "ESZ4", "NQH5", "YM", "RTYM4", "CLF5", "GCG5", "SIH5", "ZBM4", "ZN", "ZC", "ZS", "ZW",
    ])
    def test_futures_roots(self, symbol):
        """Symbols containing a futures root and no crypto keyword are futures"""
        assert detect_instrument_type(symbol) is InstrumentType.FUTURES

    @pytest.mark.parametrize("symbol", ["EURUSD", "GBPJPY", "XAUUSD", "AUD/NZD", "", "usdjpy"])
    def test_everything_else_is_forex(self, symbol):
        """Unmatched symbols default to forex"""
        assert detect_instrument_type(symbol) is InstrumentType.FOREX

    def test_crypto_checked_before_futures(self):
        """A symbol matching both sets resolves to crypto"""
        # 'ESBTC' contains the futures root ES and the crypto keyword BTC
        assert detect_instrument_type("ESBTC") is InstrumentType.CRYPTO

    def test_case_insensitive(self):
        """Lowercase symbols classify like uppercase ones"""
        assert detect_instrument_type("eth") is InstrumentType.CRYPTO
        assert detect_instrument_type("nq") is InstrumentType.FUTURES

    def test_substring_false_positive_is_preserved(self):
        """Substring matching classifies USDCLP as futures via CL"""
        assert detect_instrument_type("USDCLP") is InstrumentType.FUTURES


class TestNormalizeSymbol:
    """Test symbol normalization"""

    def test_strips_separators(self):
        assert normalize_symbol("eur/usd") == "EURUSD"
        assert normalize_symbol("BTC-USD") == "BTCUSD"
        assert normalize_symbol("xau_usd ") == "XAUUSD"
