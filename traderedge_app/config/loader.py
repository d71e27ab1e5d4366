"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..data.models import RiskProfile, canonicalize_questionnaire
from ..errors import ConfigurationError, MalformedDataError
from .defaults import DefaultConfig, SizingParams, get_default_config
from .validation import ConfigValidator

PROFILE_FILE = "profile.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def _read_profile_file(self) -> dict[str, Any]:
        profile_file = self.config_dir / PROFILE_FILE

        if not profile_file.exists():
            return {}

        try:
            with open(profile_file) as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MalformedDataError(
                f"Failed to parse {profile_file}: {e}",
                raw_data=str(profile_file),
                expected_format="yaml",
            ) from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise MalformedDataError(
                f"{profile_file} must contain a mapping",
                raw_data=str(profile_file),
                expected_format="yaml mapping",
            )
        return document

    def load_questionnaire(self) -> dict[str, Any]:
        """Load the cached questionnaire answers, keys in snake_case."""
        answers = self._read_profile_file().get("questionnaire") or {}
        return canonicalize_questionnaire(answers)

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Cached questionnaire and sizing settings from profile.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        document = self._read_profile_file()
        file_config = {
            "profile": canonicalize_questionnaire(document.get("questionnaire") or {}),
            "sizing": document.get("sizing") or {},
        }
        config = self._deep_merge(config, file_config)

        if overrides:
            canonical_overrides = dict(overrides)
            if "profile" in canonical_overrides:
                canonical_overrides["profile"] = canonicalize_questionnaire(
                    canonical_overrides["profile"]
                )
            config = self._deep_merge(config, canonical_overrides)

        return config

    def load_profile(self, overrides: Optional[dict[str, Any]] = None) -> RiskProfile:
        """
        Build the risk profile from the questionnaire cache.

        Args:
            overrides: Questionnaire fields that replace the cached answers

        Returns:
            RiskProfile with defaults filled in for missing answers
        """
        # Defaults apply per field inside from_questionnaire, after the
        # account size -> account equity fallback
        answers = self.load_questionnaire()
        answers.update(canonicalize_questionnaire(overrides or {}))
        return RiskProfile.from_questionnaire(answers, defaults=self.defaults.profile)

    def load_sizing_params(self) -> SizingParams:
        """
        Load sizing constants, rejecting invalid values.

        Raises:
            ConfigurationError: If the merged sizing settings fail validation
        """
        sizing = self.merge_config()["sizing"]
        errors = ConfigValidator.validate_sizing_params(sizing)
        if errors:
            raise ConfigurationError(
                "Invalid sizing configuration",
                source=str(self.config_dir / PROFILE_FILE),
                errors=errors,
            )

        known = {f.name for f in fields(SizingParams)}
        return SizingParams(**{k: v for k, v in sizing.items() if k in known})

    def load_config(self) -> DefaultConfig:
        """Load the complete configuration used by the engine."""
        return DefaultConfig(profile=self.defaults.profile, sizing=self.load_sizing_params())

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
