"""Dynamic risk adjustment and prop firm drawdown limits"""

from dataclasses import dataclass, field
from typing import Optional

import structlog

from ..config.defaults import PROP_FIRM_RULES, PropFirmRules, SizingParams
from ..data.models import RiskProfile
from .pnl import calculate_lot_breakdown, stop_distance_in_pips

logger = structlog.get_logger(__name__)

DEFAULT_PROP_FIRM = "FTMO"


def calculate_dynamic_position_size(
    current_equity: float,
    base_risk_percentage: float,
    recent_losses: int,
    consecutive_losses_limit: int = SizingParams.consecutive_losses_limit,
    loss_risk_multiplier: float = SizingParams.loss_risk_multiplier,
) -> float:
    """
    Dollar risk for the next trade, reduced after a losing streak

    Args:
        current_equity: Account equity in USD
        base_risk_percentage: Risk per trade before adjustment, in percent
        recent_losses: Consecutive losing trades, tracked by the caller
        consecutive_losses_limit: Streak length that triggers the reduction
        loss_risk_multiplier: Scale applied to the risk once triggered

    Returns:
        Dollar amount to risk
    """
    risk_percentage = base_risk_percentage

    if recent_losses >= consecutive_losses_limit:
        risk_percentage *= loss_risk_multiplier
        logger.info(
            "Risk reduced after losing streak",
            recent_losses=recent_losses,
            base_risk_percentage=base_risk_percentage,
            adjusted_risk_percentage=risk_percentage,
        )

    return (current_equity * risk_percentage) / 100


def get_prop_firm_rules(prop_firm: Optional[str]) -> PropFirmRules:
    """Rules for a prop firm by name, FTMO's for unknown firms."""
    rules = PROP_FIRM_RULES.get(prop_firm or DEFAULT_PROP_FIRM)
    if rules is None:
        logger.debug("Unknown prop firm, using default rules",
                     prop_firm=prop_firm, default=DEFAULT_PROP_FIRM)
        rules = PROP_FIRM_RULES[DEFAULT_PROP_FIRM]
    return rules


def max_lots_for_account(account_size: float, rules: PropFirmRules) -> float:
    """Largest position the firm allows: one lot per $10k at 100% sizing."""
    return (account_size / 10000) * (rules.max_position_size / 100)


@dataclass(frozen=True)
class RiskLimitCheck:
    """Whether an account is inside its drawdown limits, with early warnings."""
    safe: bool
    warnings: list[str] = field(default_factory=list)


def is_within_risk_limits(
    current_drawdown: float,
    daily_pnl: float,
    rules: PropFirmRules,
    warning_ratio: float = SizingParams.limit_warning_ratio,
) -> RiskLimitCheck:
    """
    Check drawdown and daily loss against a prop firm's limits

    Both figures are percentages of the account; their sign is ignored.

    Args:
        current_drawdown: Total drawdown from peak equity, in percent
        daily_pnl: Today's P&L, in percent
        rules: Prop firm limits
        warning_ratio: Fraction of a limit at which a warning is raised

    Returns:
        RiskLimitCheck with safe=False once either limit is reached
    """
    warnings = []
    drawdown = abs(current_drawdown)
    daily = abs(daily_pnl)

    if drawdown >= rules.max_total_drawdown * warning_ratio:
        warnings.append(f"Approaching max drawdown limit ({rules.max_total_drawdown:g}%)")

    if daily >= rules.max_daily_drawdown * warning_ratio:
        warnings.append(f"Approaching daily loss limit ({rules.max_daily_drawdown:g}%)")

    safe = drawdown < rules.max_total_drawdown and daily < rules.max_daily_drawdown

    if not safe:
        logger.warning(
            "Risk limit breached",
            current_drawdown=current_drawdown,
            daily_pnl=daily_pnl,
            max_total_drawdown=rules.max_total_drawdown,
            max_daily_drawdown=rules.max_daily_drawdown,
        )

    return RiskLimitCheck(safe=safe, warnings=warnings)


def calculate_signal_lot_size(profile: RiskProfile, symbol: str,
                              entry_price: float, stop_loss: float) -> float:
    """
    Quick lot size for a signal, capped by the profile's prop firm limit

    Args:
        profile: Trader's risk profile
        symbol: Ticker of the signal
        entry_price: Entry price
        stop_loss: Stop loss price

    Returns:
        Lot size no larger than the firm's maximum for the account
    """
    stop_pips = stop_distance_in_pips(symbol, entry_price, stop_loss)
    breakdown = calculate_lot_breakdown(
        account_balance=profile.account_size,
        risk_percentage=profile.risk_percentage,
        stop_loss_pips=stop_pips,
        currency_pair=symbol,
    )
    max_lots = max_lots_for_account(profile.account_size, get_prop_firm_rules(profile.prop_firm))
    return min(breakdown.lot_size, max_lots)
