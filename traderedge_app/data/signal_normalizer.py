"""
Signal normalization for converting raw signal payloads to canonical form.

Signals reach the calculator from several producers (bot signals, agent
signals, VIP signals) which have used different field names over time.
This module resolves those aliases into a single ``Signal`` record.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .models import Signal
from traderedge_app.utils.numeric import to_float

logger = logging.getLogger(__name__)

DEFAULT_SYMBOL = "EURUSD"

# Checked in order; a falsy value falls through to the next alias
SYMBOL_ALIASES = ("pair", "symbol")
ENTRY_ALIASES = ("entry", "entryPrice", "entry_price")
STOP_ALIASES = ("stopLoss", "stop_loss")
TARGET_ALIASES = ("takeProfit", "take_profit")
DIRECTION_ALIASES = ("direction", "side", "signal_type")


@dataclass
class SignalNormalizationResult:
    """Result of signal normalization process."""
    # Normalized data (None if invalid)
    signal: Optional[Signal] = None
    # Processing metadata
    success: bool = True
    error_msg: Optional[str] = None

    @classmethod
    def success_with_signal(cls, signal: Signal):
        """Create successful result with signal."""
        return cls(signal=signal, success=True)

    @classmethod
    def error(cls, error_msg: str):
        """Create error result."""
        return cls(success=False, error_msg=error_msg)


def _first_truthy(raw: Mapping[str, Any], aliases: tuple[str, ...]) -> Any:
    for alias in aliases:
        value = raw.get(alias)
        if value:
            return value
    return None


class SignalNormalizer:
    """
    Signal payload normalization pipeline.

    Missing or zero prices are not rejected here; they come through as 0.0
    and the calculator reports the trade as invalid.
    """

    def __init__(self, default_symbol: str = DEFAULT_SYMBOL):
        self.default_symbol = default_symbol
        self.logger = logger

    def normalize(self, raw: Mapping[str, Any]) -> SignalNormalizationResult:
        """
        Normalize a raw signal payload.

        Args:
            raw: Signal dictionary using any of the historical field names

        Returns:
            SignalNormalizationResult with the signal or error information
        """
        if not isinstance(raw, Mapping):
            return SignalNormalizationResult.error(
                f"Signal payload must be a mapping, got {type(raw).__name__}"
            )

        symbol = _first_truthy(raw, SYMBOL_ALIASES) or self.default_symbol
        if not isinstance(symbol, str):
            return SignalNormalizationResult.error(f"Invalid symbol: {symbol!r}")

        entry_price = to_float(_first_truthy(raw, ENTRY_ALIASES))
        stop_loss = to_float(_first_truthy(raw, STOP_ALIASES))

        take_profit_raw = raw.get("takeProfit")
        if isinstance(take_profit_raw, (list, tuple)):
            take_profit = to_float(take_profit_raw[0]) if take_profit_raw else 0.0
        else:
            take_profit = to_float(_first_truthy(raw, TARGET_ALIASES))

        direction = _first_truthy(raw, DIRECTION_ALIASES)
        if isinstance(direction, str):
            direction = direction.upper()
            if direction in ("LONG", "BUY"):
                direction = "BUY"
            elif direction in ("SHORT", "SELL"):
                direction = "SELL"
            else:
                direction = None
        else:
            direction = None

        signal = Signal(
            symbol=symbol.strip(),
            entry_price=entry_price,
            stop_loss=stop_loss,
            take_profit=take_profit,
            direction=direction,
        )

        if not signal.has_valid_prices:
            self.logger.debug("Signal %s missing prices: %s", signal.symbol, signal.missing_fields)

        return SignalNormalizationResult.success_with_signal(signal)
