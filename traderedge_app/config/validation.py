"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from ..data.models import parse_risk_reward_ratio

MIN_ACCOUNT_SIZE = 1000
MAX_ACCOUNT_SIZE = 10_000_000
MIN_RISK_PERCENTAGE = 0.1
MAX_RISK_PERCENTAGE = 10


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_profile(params: dict[str, Any]) -> list[ValidationError]:
        """Validate questionnaire profile answers (snake_case keys)."""
        errors = []

        # Validate account_size
        if "account_size" in params:
            value = params["account_size"]
            if not _is_number(value) or not MIN_ACCOUNT_SIZE <= value <= MAX_ACCOUNT_SIZE:
                errors.append(ValidationError(
                    field="account_size",
                    message=f"Must be a number between {MIN_ACCOUNT_SIZE:,} and {MAX_ACCOUNT_SIZE:,}",
                    value=value
                ))

        # Validate risk_percentage
        if "risk_percentage" in params:
            value = params["risk_percentage"]
            if not _is_number(value) or not MIN_RISK_PERCENTAGE <= value <= MAX_RISK_PERCENTAGE:
                errors.append(ValidationError(
                    field="risk_percentage",
                    message=f"Must be a number between {MIN_RISK_PERCENTAGE} and {MAX_RISK_PERCENTAGE}",
                    value=value
                ))

        # Validate risk_reward_ratio
        if "risk_reward_ratio" in params:
            value = params["risk_reward_ratio"]
            if not ConfigValidator._is_valid_ratio(value):
                errors.append(ValidationError(
                    field="risk_reward_ratio",
                    message="Must be a positive number or a ratio like 1:2",
                    value=value
                ))

        # Validate prop_firm
        if "prop_firm" in params:
            value = params["prop_firm"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="prop_firm",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def _is_valid_ratio(value: Any) -> bool:
        # Valid exactly when parse_risk_reward_ratio yields a positive multiple
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            return False
        return parse_risk_reward_ratio(value, default=0.0) > 0

    @staticmethod
    def validate_sizing_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate sizing parameters."""
        errors = []

        for name in ("min_lot_size", "futures_tick_size"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        for name in ("lot_precision", "crypto_precision", "consecutive_losses_limit"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        for name in ("loss_risk_multiplier", "limit_warning_ratio"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0 or value > 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number between 0 and 1",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "profile" in config:
            errors.extend(ConfigValidator.validate_profile(config["profile"]))

        if "sizing" in config:
            errors.extend(ConfigValidator.validate_sizing_params(config["sizing"]))

        return errors
