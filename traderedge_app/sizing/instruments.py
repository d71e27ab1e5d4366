"""Instrument classification from ticker symbols"""

from traderedge_app.data.models import InstrumentType

CRYPTO_KEYWORDS = ("BTC", "ETH", "SOL", "XRP", "DOGE", "ADA", "USDT", "BNB")
FUTURES_ROOTS = ("ES", "NQ", "YM", "RTY", "CL", "GC", "SI", "ZB", "ZN", "ZC", "ZS", "ZW")


def normalize_symbol(symbol: str) -> str:
    """Uppercase a symbol and drop separators, so 'eur/usd' becomes 'EURUSD'."""
    upper = symbol.upper()
    for separator in ("/", "-", "_", " "):
        upper = upper.replace(separator, "")
    return upper


def detect_instrument_type(symbol: str) -> InstrumentType:
    """
    Classify a symbol as crypto, futures or forex

    Case-insensitive substring match. Crypto keywords are checked before
    futures roots, and anything unmatched is forex. Substring matching can
    misfire on unrelated symbols (e.g. 'USDCLP' contains 'CL'); the order of
    checks is kept as-is until product confirms the intended precedence.

    Args:
        symbol: Ticker such as 'EURUSD', 'ESZ4' or 'BTC/USDT'

    Returns:
        InstrumentType, never raises
    """
    upper = (symbol or "").upper()

    if any(keyword in upper for keyword in CRYPTO_KEYWORDS):
        return InstrumentType.CRYPTO

    if any(root in upper for root in FUTURES_ROOTS):
        return InstrumentType.FUTURES

    return InstrumentType.FOREX
