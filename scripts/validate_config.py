#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from traderedge_app.config.loader import ConfigLoader
from traderedge_app.config.validation import ConfigValidator, ValidationError
from traderedge_app.errors import DataQualityError


def validate_cached_profile(loader: ConfigLoader) -> List[ValidationError]:
    """Validate the cached questionnaire answers on their own."""
    return ConfigValidator.validate_profile(loader.load_questionnaire())


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)
    print(f"🔍 Validating TraderEdge configuration in {loader.config_dir}...")

    all_valid = True

    print(f"\n📋 Validating questionnaire answers...")
    try:
        errors = validate_cached_profile(loader)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            profile = loader.load_profile()
            print(f"✅ Questionnaire is valid: ${profile.account_size:,.0f} at "
                  f"{profile.risk_percentage}% risk, min R:R {profile.risk_reward_ratio}")
    except DataQualityError as e:
        print(f"❌ Error reading questionnaire: {e}")
        all_valid = False

    print(f"\n📐 Validating merged configuration...")
    try:
        errors = ConfigValidator.validate_config(loader.merge_config())
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ Merged configuration is valid")
    except DataQualityError as e:
        print(f"❌ Error merging configuration: {e}")
        all_valid = False

    if all_valid:
        print(f"\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
