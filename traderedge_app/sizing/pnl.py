"""
Trade P&L helpers.

Outcome-based P&L for journaling, pip-based P&L and reward:risk for a
directional trade, and the quick lot breakdown used by the risk widget.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import InvalidTradeParametersError
from ..utils.numeric import floor_to
from .values import lookup_pair_pip_value
from .instruments import normalize_symbol


class TradeOutcome(str, Enum):
    """How a taken trade closed."""
    TARGET_HIT = "target_hit"
    STOP_LOSS_HIT = "stop_loss_hit"
    BREAKEVEN = "breakeven"
    CUSTOM = "custom"


def get_outcome_pnl(outcome: TradeOutcome, potential_profit: float,
                    potential_loss: float, custom_pnl: Optional[float] = None) -> float:
    """Realised P&L for a closed trade; losses are negative."""
    if outcome is TradeOutcome.TARGET_HIT:
        return potential_profit
    if outcome is TradeOutcome.STOP_LOSS_HIT:
        return -potential_loss
    if outcome is TradeOutcome.CUSTOM:
        return custom_pnl or 0.0
    return 0.0


def format_pnl(pnl: float) -> str:
    """Dashboard P&L string: '+$12.50' for gains, '$12.50' for losses."""
    prefix = "+" if pnl >= 0 else ""
    return f"{prefix}${abs(pnl):.2f}"


def _pip_multiplier(pair: str) -> float:
    return 100.0 if "JPY" in normalize_symbol(pair) else 10000.0


def calculate_pnl(entry_price: float, exit_price: float, direction: str,
                  lot_size: float, currency_pair: str) -> float:
    """
    Pip-based P&L of a closed forex trade

    Args:
        entry_price: Fill price
        exit_price: Close price
        direction: 'BUY' or 'SELL'
        lot_size: Standard lots traded
        currency_pair: Pair such as 'EUR/USD'

    Returns:
        P&L in USD, negative for a loss
    """
    if direction.upper() == "BUY":
        price_diff = exit_price - entry_price
    else:
        price_diff = entry_price - exit_price

    pips = price_diff * _pip_multiplier(currency_pair)
    return pips * lookup_pair_pip_value(currency_pair) * lot_size


@dataclass(frozen=True)
class RiskRewardSummary:
    """Absolute price risk and reward with a '1:x' ratio label."""
    risk: float
    reward: float
    ratio: str


def calculate_risk_reward(entry_price: float, stop_loss: float,
                          take_profit: float, direction: str) -> RiskRewardSummary:
    """Reward:risk of a directional trade, '1:0.00' when the stop sits at entry."""
    if direction.upper() == "BUY":
        risk = entry_price - stop_loss
        reward = take_profit - entry_price
    else:
        risk = stop_loss - entry_price
        reward = entry_price - take_profit

    ratio = abs(reward / risk) if risk else 0.0

    return RiskRewardSummary(
        risk=abs(risk),
        reward=abs(reward),
        ratio=f"1:{ratio:.2f}",
    )


@dataclass(frozen=True)
class LotBreakdown:
    """Lot size expressed as standard, mini and micro lots."""
    lot_size: float
    micro_lots: int
    mini_lots: float
    standard_lots: float
    risk_amount: float
    pip_value: float


def calculate_lot_breakdown(account_balance: float, risk_percentage: float,
                            stop_loss_pips: float, currency_pair: str,
                            min_lot_size: float = 0.01) -> LotBreakdown:
    """
    Lot size for a stop distance already expressed in pips

    Sizes are truncated rather than rounded, so the risk is never exceeded
    except by the minimum lot floor.

    Raises:
        InvalidTradeParametersError: If the stop distance is not positive
    """
    if stop_loss_pips <= 0:
        raise InvalidTradeParametersError(
            f"Stop loss distance must be positive, got {stop_loss_pips}",
            missing_fields=["stop_loss_pips"],
            symbol=currency_pair,
        )

    risk_amount = account_balance * (risk_percentage / 100)
    pip_value = lookup_pair_pip_value(currency_pair)

    standard_lots = risk_amount / (stop_loss_pips * pip_value)
    mini_lots = standard_lots * 10
    micro_lots = standard_lots * 100

    return LotBreakdown(
        lot_size=max(min_lot_size, floor_to(micro_lots, 0) / 100),
        micro_lots=int(floor_to(micro_lots, 0)),
        mini_lots=floor_to(mini_lots, 1),
        standard_lots=floor_to(standard_lots, 2),
        risk_amount=risk_amount,
        pip_value=pip_value,
    )


def stop_distance_in_pips(symbol: str, entry_price: float, stop_loss: float) -> float:
    """
    Stop distance in pips for the quick lot breakdown

    Crypto is measured in percent of entry, gold in $0.10 steps, JPY pairs in
    0.01 steps and other pairs in 0.0001 steps. Never less than one pip.
    """
    normalized = normalize_symbol(symbol)
    distance = abs(entry_price - stop_loss)

    if "BTC" in normalized or "ETH" in normalized:
        pips = distance / entry_price * 100 if entry_price else 0.0
    elif "XAU" in normalized:
        pips = distance * 10
    elif "JPY" in normalized:
        pips = distance * 100
    else:
        pips = distance * 10000

    return max(1.0, pips)
