"""
Main sizing engine coordinator.

Orchestrates the sizing pipeline for incoming trade signals:
raw payload -> normalization -> risk profile -> position size.
"""

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

import structlog

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import InstrumentType, RiskProfile, SizingOutcome, canonicalize_questionnaire
from .data.signal_normalizer import SignalNormalizer
from .logging.config import get_sizing_logger
from .sizing.calculator import PositionSizeCalculator
from .sizing.instruments import detect_instrument_type
from .sizing.risk import (
    RiskLimitCheck,
    calculate_dynamic_position_size,
    get_prop_firm_rules,
    is_within_risk_limits,
)

logger = structlog.get_logger(__name__)
sizing_logger = get_sizing_logger(__name__)


class SizingEngine:
    """
    Coordinator for sizing trade signals against a trader's risk profile.

    The profile is either injected explicitly or loaded once from the cached
    questionnaire in the configuration directory.
    """

    def __init__(self, config_dir: Optional[Path] = None,
                 profile: Optional[RiskProfile] = None) -> None:
        """Initialize the sizing engine."""
        self.logger = logger
        self.sizing_logger = sizing_logger

        self.config_loader = ConfigLoader.create(config_dir)
        self.config = self.config_loader.load_config()
        self.normalizer = SignalNormalizer()
        self.calculator = PositionSizeCalculator(self.config)

        if profile is None:
            self._warn_on_invalid_questionnaire()
            profile = self.config_loader.load_profile()
        self.profile = profile

        self.logger.info(
            "Sizing engine initialized",
            account_size=self.profile.account_size,
            risk_percentage=self.profile.risk_percentage,
            prop_firm=self.profile.prop_firm,
        )

    def _warn_on_invalid_questionnaire(self) -> None:
        answers = self.config_loader.load_questionnaire()
        for error in ConfigValidator.validate_profile(answers):
            self.logger.warning(
                "Questionnaire answer out of range",
                field=error.field,
                message=error.message,
                value=error.value,
            )

    def profile_with_overrides(self, overrides: Optional[Mapping[str, Any]] = None) -> RiskProfile:
        """Return the engine profile with questionnaire-style overrides applied."""
        if not overrides:
            return self.profile

        answers = {
            "account_size": self.profile.account_size,
            "risk_percentage": self.profile.risk_percentage,
            "risk_reward_ratio": self.profile.risk_reward_ratio,
            "prop_firm": self.profile.prop_firm,
        }
        answers.update(canonicalize_questionnaire(overrides))
        return RiskProfile.from_questionnaire(answers, defaults=self.config.profile)

    def evaluate_signal(self, raw_signal: Mapping[str, Any],
                        overrides: Optional[Mapping[str, Any]] = None) -> SizingOutcome:
        """
        Size a single raw signal.

        Args:
            raw_signal: Signal payload using any of the supported field names
            overrides: Questionnaire fields replacing the profile for this call

        Returns:
            SizingOutcome; malformed payloads come back invalid, never raise
        """
        normalization = self.normalizer.normalize(raw_signal)

        if not normalization.success or normalization.signal is None:
            self.logger.warning("Signal normalization failed", error=normalization.error_msg)
            symbol = ""
            if isinstance(raw_signal, Mapping):
                symbol = str(raw_signal.get("pair") or raw_signal.get("symbol") or "")
            instrument_type = detect_instrument_type(symbol) if symbol else InstrumentType.FOREX
            return SizingOutcome.invalid(normalization.error_msg or "Invalid input data",
                                         instrument_type)

        profile = self.profile_with_overrides(overrides)
        return self.calculator.calculate(normalization.signal, profile)

    def adjust_risk(self, recent_losses: int, current_equity: Optional[float] = None) -> float:
        """
        Dollar risk for the next trade under the configured losing-streak rule.

        Args:
            recent_losses: Consecutive losing trades
            current_equity: Account equity, defaults to the profile's account size

        Returns:
            Dollar amount to risk
        """
        sizing = self.config.sizing
        equity = self.profile.account_size if current_equity is None else current_equity
        return calculate_dynamic_position_size(
            equity,
            self.profile.risk_percentage,
            recent_losses,
            consecutive_losses_limit=sizing.consecutive_losses_limit,
            loss_risk_multiplier=sizing.loss_risk_multiplier,
        )

    def check_limits(self, current_drawdown: float, daily_pnl: float) -> RiskLimitCheck:
        """Check the account against its prop firm limits at the configured warning ratio."""
        return is_within_risk_limits(
            current_drawdown,
            daily_pnl,
            get_prop_firm_rules(self.profile.prop_firm),
            warning_ratio=self.config.sizing.limit_warning_ratio,
        )

    def evaluate_signals(self, raw_signals: Iterable[Mapping[str, Any]]) -> list[SizingOutcome]:
        """Size a batch of signals, one outcome per input in order."""
        outcomes = [self.evaluate_signal(raw) for raw in raw_signals]

        invalid_count = sum(1 for outcome in outcomes if not outcome.success)
        self.sizing_logger.info(
            "Signal batch sized",
            total=len(outcomes),
            invalid=invalid_count,
        )
        return outcomes
