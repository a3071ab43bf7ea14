#!/usr/bin/env python3
"""Configuration validation script."""

import sys

from token_insights.config.loader import ConfigLoader
from token_insights.config.validation import ConfigValidator, ValidationError


def validate_profile_config(loader: ConfigLoader, profile: str) -> list[ValidationError]:
    """Validate the merged configuration for one profile."""
    config = loader.merge_config(profile)
    return ConfigValidator.validate_config(config)


def list_profiles(loader: ConfigLoader) -> list[str]:
    """Profile names declared in insights.yaml, default first."""
    return ["default"] + sorted(name for name in loader.load_profiles() if name != "default")


def main():
    """Main validation function."""
    print("🔍 Validating token insights configuration...")

    loader = ConfigLoader.create()
    all_valid = True

    for profile in list_profiles(loader):
        print(f"\n📊 Validating profile {profile}...")

        errors = validate_profile_config(loader, profile)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {profile} configuration is valid")

    print("\n📋 Testing per-call overrides...")
    test_overrides = {
        "anomalies": {"std_dev_multiplier": 3.0},
        "execution": {"parallel_number_theory": True},
    }

    errors = ConfigValidator.validate_config(loader.merge_config("default", test_overrides))
    if errors:
        print("❌ Override validation failed:")
        for error in errors:
            print(f"  • {error.field}: {error.message}")
        all_valid = False
    else:
        print("✅ Override validation passed")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
