"""Position size and P&L calculator for forex, futures and crypto signals"""

from dataclasses import dataclass
from typing import Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import (
    POSITION_LABELS,
    CalculationResult,
    InstrumentType,
    RiskProfile,
    Signal,
    SizingOutcome,
)
from ..logging.config import get_sizing_logger, log_calculation
from ..utils.numeric import round_half_up
from .instruments import detect_instrument_type
from .values import get_pip_size, get_pip_value_per_lot

logger = get_sizing_logger(__name__)

INVALID_INPUT_REASON = "Invalid input data"
ZERO_STOP_DISTANCE_REASON = "Stop loss equals entry price"


@dataclass(frozen=True)
class _RawSizing:
    """Unrounded size and distances in instrument-native units."""
    lot_size: float
    stop_distance: float
    target_distance: float
    value_per_unit: float
    breakdown: str


class PositionSizeCalculator:
    """
    Sizes a signal against a risk profile

    Stateless: the same signal and profile always give the same outcome.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self.params = self.config.sizing

    def calculate(self, signal: Signal, profile: RiskProfile) -> SizingOutcome:
        """
        Calculate lot size, projected P&L and reward:risk for a signal

        Args:
            signal: Trade with entry, stop and optional target prices
            profile: Account size, risk percentage and reward:risk preference

        Returns:
            SizingOutcome.ok with the result, or SizingOutcome.invalid when
            the entry or stop price is missing. Never raises for bad input.
        """
        instrument_type = detect_instrument_type(signal.symbol)

        if not signal.has_valid_prices:
            outcome = SizingOutcome.invalid(
                INVALID_INPUT_REASON,
                instrument_type,
                missing_fields=tuple(signal.missing_fields),
            )
            log_calculation(logger, signal.symbol, outcome)
            return outcome

        if signal.entry_price == signal.stop_loss:
            outcome = SizingOutcome.invalid(ZERO_STOP_DISTANCE_REASON, instrument_type)
            log_calculation(logger, signal.symbol, outcome)
            return outcome

        money_at_risk = profile.money_at_risk

        if instrument_type is InstrumentType.FOREX:
            raw = self._size_forex(signal, money_at_risk)
        elif instrument_type is InstrumentType.FUTURES:
            raw = self._size_futures(signal, money_at_risk)
        else:
            raw = self._size_crypto(signal, money_at_risk)

        precision = (self.params.crypto_precision if instrument_type is InstrumentType.CRYPTO
                     else self.params.lot_precision)
        lot_size = max(self.params.min_lot_size, round_half_up(raw.lot_size, precision))

        # P&L uses the rounded size, so realised risk can drift from the request
        potential_loss = raw.stop_distance * lot_size * raw.value_per_unit
        potential_profit = raw.target_distance * lot_size * raw.value_per_unit

        risk_reward = self._risk_reward(signal)

        result = CalculationResult(
            lot_size=lot_size,
            potential_profit=round_half_up(potential_profit, 2),
            potential_loss=round_half_up(potential_loss, 2),
            dollar_amount=round_half_up(money_at_risk, 2),
            matches_user_preference=risk_reward >= profile.risk_reward_ratio,
            risk_reward=risk_reward,
            stop_loss_pips=round_half_up(raw.stop_distance, 1),
            take_profit_pips=round_half_up(raw.target_distance, 1),
            instrument_type=instrument_type,
            position_label=POSITION_LABELS[instrument_type],
            calculation_breakdown=raw.breakdown,
        )
        outcome = SizingOutcome.ok(result)
        log_calculation(logger, signal.symbol, outcome)
        return outcome

    def _size_forex(self, signal: Signal, money_at_risk: float) -> _RawSizing:
        pip_size = get_pip_size(signal.symbol)
        pip_value = get_pip_value_per_lot(signal.symbol, InstrumentType.FOREX)

        stop_pips = abs(signal.entry_price - signal.stop_loss) / pip_size
        target_pips = (abs(signal.take_profit - signal.entry_price) / pip_size
                       if signal.take_profit else 0.0)
        lot_size = money_at_risk / (stop_pips * pip_value)

        breakdown = (
            f"Lot Size = ${money_at_risk:.2f} ÷ ({stop_pips:.1f} pips × "
            f"${pip_value:g}/pip) = {lot_size:.2f} lots"
        )
        return _RawSizing(lot_size, stop_pips, target_pips, pip_value, breakdown)

    def _size_futures(self, signal: Signal, money_at_risk: float) -> _RawSizing:
        tick_size = self.params.futures_tick_size
        tick_value = get_pip_value_per_lot(signal.symbol, InstrumentType.FUTURES)

        stop_ticks = abs(signal.entry_price - signal.stop_loss) / tick_size
        target_ticks = (abs(signal.take_profit - signal.entry_price) / tick_size
                        if signal.take_profit else 0.0)
        contracts = money_at_risk / (stop_ticks * tick_value)

        breakdown = (
            f"Contracts = ${money_at_risk:.2f} ÷ ({stop_ticks:.0f} ticks × "
            f"${tick_value:g}/tick) = {contracts:.2f}"
        )
        return _RawSizing(contracts, stop_ticks, target_ticks, tick_value, breakdown)

    def _size_crypto(self, signal: Signal, money_at_risk: float) -> _RawSizing:
        stop_distance = abs(signal.entry_price - signal.stop_loss)
        target_distance = (abs(signal.take_profit - signal.entry_price)
                           if signal.take_profit else 0.0)
        stop_fraction = stop_distance / signal.entry_price

        position_value_usd = money_at_risk / stop_fraction
        coins = position_value_usd / signal.entry_price

        breakdown = (
            f"Position = ${money_at_risk:.2f} ÷ ({stop_fraction * 100:.2f}% SL) = "
            f"{coins:.4f} units (${position_value_usd:.2f})"
        )
        value_per_unit = get_pip_value_per_lot(signal.symbol, InstrumentType.CRYPTO)
        return _RawSizing(coins, stop_distance, target_distance, value_per_unit, breakdown)

    @staticmethod
    def _risk_reward(signal: Signal) -> float:
        """Reward:risk from raw price distances, 0.0 without a target."""
        risk = abs(signal.entry_price - signal.stop_loss)
        reward = abs(signal.take_profit - signal.entry_price) if signal.take_profit else 0.0
        if risk > 0 and reward > 0:
            return round_half_up(reward / risk, 2)
        return 0.0


def calculate_position(signal: Signal, profile: RiskProfile,
                       config: Optional[DefaultConfig] = None) -> SizingOutcome:
    """Size a signal with a one-off calculator."""
    return PositionSizeCalculator(config).calculate(signal, profile)
