"""Position sizing, risk adjustment and P&L calculations"""

from .calculator import PositionSizeCalculator, calculate_position
from .instruments import detect_instrument_type, normalize_symbol
from .pnl import (
    TradeOutcome,
    calculate_lot_breakdown,
    calculate_pnl,
    calculate_risk_reward,
    format_pnl,
    get_outcome_pnl,
    stop_distance_in_pips,
)
from .risk import (
    RiskLimitCheck,
    calculate_dynamic_position_size,
    calculate_signal_lot_size,
    get_prop_firm_rules,
    is_within_risk_limits,
    max_lots_for_account,
)
from .values import get_pip_size, get_pip_value_per_lot, lookup_pair_pip_value

__all__ = [
    "PositionSizeCalculator",
    "calculate_position",
    "detect_instrument_type",
    "normalize_symbol",
    "get_pip_size",
    "get_pip_value_per_lot",
    "lookup_pair_pip_value",
    "RiskLimitCheck",
    "calculate_dynamic_position_size",
    "calculate_signal_lot_size",
    "get_prop_firm_rules",
    "is_within_risk_limits",
    "max_lots_for_account",
    "TradeOutcome",
    "calculate_lot_breakdown",
    "calculate_pnl",
    "calculate_risk_reward",
    "format_pnl",
    "get_outcome_pnl",
    "stop_distance_in_pips",
]
