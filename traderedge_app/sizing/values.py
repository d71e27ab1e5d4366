"""Static pip and tick value tables"""

from typing import Optional

from traderedge_app.data.models import InstrumentType
from .instruments import detect_instrument_type, normalize_symbol

STANDARD_PIP_SIZE = 0.0001
JPY_PIP_SIZE = 0.01

FOREX_PIP_VALUE = 10.0          # USD per pip per standard lot
GOLD_PIP_VALUE = 100.0
SILVER_PIP_VALUE = 50.0
CRYPTO_UNIT_VALUE = 1.0         # P&L scales with size x price delta

# USD per tick per contract, checked in order
FUTURES_TICK_VALUES = (
    ("ES", 12.50),   # E-mini S&P 500
    ("NQ", 5.00),    # E-mini NASDAQ
    ("YM", 5.00),    # E-mini Dow
    ("CL", 10.00),   # Crude Oil
    ("GC", 10.00),   # Gold futures
)
DEFAULT_TICK_VALUE = 12.50

# USD per pip per standard lot for the quick lot breakdown
PIP_VALUES: dict[str, float] = {
    "EURUSD": 10.0,
    "GBPUSD": 10.0,
    "AUDUSD": 10.0,
    "NZDUSD": 10.0,
    "USDJPY": 9.09,
    "USDCHF": 10.75,
    "USDCAD": 7.35,
    "EURJPY": 9.09,
    "GBPJPY": 9.09,
    "EURGBP": 12.50,
    "XAUUSD": 10.0,
    "BTCUSD": 1.0,
    "ETHUSD": 1.0,
}


def get_pip_size(symbol: str) -> float:
    """Price increment of one pip: 0.01 for JPY pairs, 0.0001 otherwise."""
    if "JPY" in symbol.upper():
        return JPY_PIP_SIZE
    return STANDARD_PIP_SIZE


def get_pip_value_per_lot(symbol: str, instrument_type: Optional[InstrumentType] = None) -> float:
    """
    Monetary value of one pip or tick for one lot, contract or coin

    Args:
        symbol: Ticker symbol
        instrument_type: Category, detected from the symbol when omitted

    Returns:
        USD value per minimum increment per unit of exposure
    """
    upper = symbol.upper()
    kind = instrument_type or detect_instrument_type(symbol)

    if kind is InstrumentType.CRYPTO:
        return CRYPTO_UNIT_VALUE

    if kind is InstrumentType.FUTURES:
        for root, tick_value in FUTURES_TICK_VALUES:
            if root in upper:
                return tick_value
        return DEFAULT_TICK_VALUE

    if "XAU" in upper or "GOLD" in upper:
        return GOLD_PIP_VALUE
    if "XAG" in upper or "SILVER" in upper:
        return SILVER_PIP_VALUE
    return FOREX_PIP_VALUE


def lookup_pair_pip_value(pair: str) -> float:
    """Per-lot pip value for a listed pair, $10 for anything unlisted."""
    return PIP_VALUES.get(normalize_symbol(pair), FOREX_PIP_VALUE)
