"""
Canonical data models for position sizing.

This module defines immutable data structures for trade signals, the
trader's risk profile and the derived sizing results. All of them are
transient: built from inputs, consumed synchronously, then discarded.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from traderedge_app.config.defaults import ProfileDefaults
from traderedge_app.errors import InvalidTradeParametersError
from traderedge_app.utils.numeric import to_float


class InstrumentType(str, Enum):
    """Instrument category driving the sizing formula."""
    FOREX = "forex"
    FUTURES = "futures"
    CRYPTO = "crypto"


POSITION_LABELS = {
    InstrumentType.FOREX: "Lot Size",
    InstrumentType.FUTURES: "Contracts",
    InstrumentType.CRYPTO: "Position",
}

# Questionnaire cache keys (camelCase from the web client) to profile fields
QUESTIONNAIRE_KEYS = {
    "accountSize": "account_size",
    "accountEquity": "account_equity",
    "riskPercentage": "risk_percentage",
    "riskRewardRatio": "risk_reward_ratio",
    "propFirm": "prop_firm",
}


@dataclass(frozen=True)
class Signal:
    """A proposed trade. Prices of 0.0 mean the value was not supplied."""
    symbol: str
    entry_price: float
    stop_loss: float
    take_profit: float = 0.0
    direction: Optional[str] = None   # 'BUY' or 'SELL', informational

    @property
    def has_valid_prices(self) -> bool:
        """True when both entry and stop are usable for sizing."""
        return bool(self.entry_price) and bool(self.stop_loss)

    @property
    def missing_fields(self) -> list[str]:
        """Names of the required prices that are absent or zero."""
        missing = []
        if not self.entry_price:
            missing.append("entry_price")
        if not self.stop_loss:
            missing.append("stop_loss")
        return missing


def parse_risk_reward_ratio(value: Any, default: float = 2.0) -> float:
    """
    Parse a reward:risk preference into a reward multiple.

    Accepts plain numbers ("2", 2.5) and "a:b" pairs. Pairs are read as the
    larger side over the smaller side, so "1:2" and "2:1" both mean 2.0;
    the web client has stored both orderings.

    Args:
        value: Raw preference from the questionnaire
        default: Multiple used when the value is missing or unparseable

    Returns:
        Reward multiple as a float
    """
    if isinstance(value, str) and ":" in value:
        left, _, right = value.partition(":")
        first, second = to_float(left), to_float(right)
        if first <= 0 or second <= 0:
            return default
        return max(first, second) / min(first, second)

    parsed = to_float(value)
    return parsed if parsed > 0 else default


def canonicalize_questionnaire(data: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase questionnaire keys onto snake_case profile fields."""
    canonical: dict[str, Any] = {}
    for key, value in data.items():
        canonical[QUESTIONNAIRE_KEYS.get(key, key)] = value
    return canonical


@dataclass(frozen=True)
class RiskProfile:
    """User-declared account size and risk preferences."""
    account_size: float = ProfileDefaults.account_size
    risk_percentage: float = ProfileDefaults.risk_percentage
    risk_reward_ratio: float = 2.0
    prop_firm: str = ProfileDefaults.prop_firm

    @classmethod
    def from_questionnaire(cls, data: Optional[Mapping[str, Any]] = None,
                           defaults: Optional[ProfileDefaults] = None) -> "RiskProfile":
        """
        Build a profile from cached questionnaire answers.

        Missing or falsy fields fall back to the defaults. The account size
        falls back to the account equity before the default balance.
        """
        defaults = defaults or ProfileDefaults()
        answers = canonicalize_questionnaire(data or {})

        account_size = (
            to_float(answers.get("account_size"))
            or to_float(answers.get("account_equity"))
            or defaults.account_size
        )
        risk_percentage = to_float(answers.get("risk_percentage")) or defaults.risk_percentage
        default_ratio = parse_risk_reward_ratio(defaults.risk_reward_ratio)
        ratio = parse_risk_reward_ratio(
            answers.get("risk_reward_ratio") or defaults.risk_reward_ratio,
            default=default_ratio,
        )

        return cls(
            account_size=account_size,
            risk_percentage=risk_percentage,
            risk_reward_ratio=ratio,
            prop_firm=answers.get("prop_firm") or defaults.prop_firm,
        )

    @property
    def money_at_risk(self) -> float:
        """Dollar amount risked per trade."""
        return self.account_size * (self.risk_percentage / 100)


@dataclass(frozen=True)
class CalculationResult:
    """Derived sizing figures for one signal under one profile."""
    lot_size: float
    potential_profit: float
    potential_loss: float
    dollar_amount: float
    matches_user_preference: bool
    risk_reward: float
    stop_loss_pips: float
    take_profit_pips: float
    instrument_type: InstrumentType
    position_label: str
    calculation_breakdown: str

    @classmethod
    def invalid(cls, instrument_type: InstrumentType,
                breakdown: str = "Invalid input data") -> "CalculationResult":
        """All-zero sentinel shown for trades that cannot be sized."""
        return cls(
            lot_size=0.0,
            potential_profit=0.0,
            potential_loss=0.0,
            dollar_amount=0.0,
            matches_user_preference=True,
            risk_reward=0.0,
            stop_loss_pips=0.0,
            take_profit_pips=0.0,
            instrument_type=instrument_type,
            position_label=POSITION_LABELS[InstrumentType.FOREX],
            calculation_breakdown=breakdown,
        )


@dataclass(frozen=True)
class SizingOutcome:
    """Tagged result of a sizing attempt: either ok with a result, or invalid."""

    result: Optional[CalculationResult] = None
    success: bool = True
    reason: Optional[str] = None
    instrument_type: Optional[InstrumentType] = None
    missing_fields: tuple[str, ...] = ()

    @classmethod
    def ok(cls, result: CalculationResult) -> "SizingOutcome":
        """Create successful outcome."""
        return cls(result=result, success=True,
                   instrument_type=result.instrument_type)

    @classmethod
    def invalid(cls, reason: str, instrument_type: InstrumentType,
                missing_fields: tuple[str, ...] = ()) -> "SizingOutcome":
        """Create invalid outcome."""
        return cls(success=False, reason=reason,
                   instrument_type=instrument_type,
                   missing_fields=missing_fields)

    def unwrap(self) -> CalculationResult:
        """Return the result, raising if the trade parameters were invalid."""
        if not self.success or self.result is None:
            raise InvalidTradeParametersError(
                self.reason or "Invalid input data",
                missing_fields=list(self.missing_fields),
            )
        return self.result

    def result_or_sentinel(self) -> CalculationResult:
        """Return the result, or the zeroed sentinel for invalid outcomes."""
        if self.success and self.result is not None:
            return self.result
        return CalculationResult.invalid(
            self.instrument_type or InstrumentType.FOREX,
            breakdown=self.reason or "Invalid input data",
        )
