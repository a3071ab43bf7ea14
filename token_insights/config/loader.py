"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, get_default_config
from .validation import ConfigValidator

PROFILES_FILE = "insights.yaml"
DEFAULT_PROFILE = "default"


@dataclass(frozen=True)
class ConfigLoader:
    """Loads insight configuration from defaults, a profile and call overrides."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a loader; config_dir defaults to the profiles shipped with the package."""
        if config_dir is None:
            config_dir = Path(__file__).parent

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_profiles(self) -> dict[str, Any]:
        """All profiles declared in insights.yaml; {} if the file is absent."""
        profiles_file = self.config_dir / PROFILES_FILE

        if not profiles_file.exists():
            return {}

        with open(profiles_file) as f:
            document = yaml.safe_load(f) or {}

        return document.get("profiles") or {}  # type: ignore[no-any-return]

    def load_profile_config(self, profile: str) -> dict[str, Any]:
        """
        Overrides declared for a profile in insights.yaml.

        Raises:
            ConfigurationError: If a profile other than 'default' is not declared
        """
        profiles = self.load_profiles()

        if profile not in profiles:
            if profile == DEFAULT_PROFILE:
                return {}
            raise ConfigurationError(
                f"Unknown configuration profile: {profile}",
                field="profile",
                context={"config_dir": str(self.config_dir), "available": sorted(profiles)}
            )

        return profiles[profile] or {}  # type: ignore[no-any-return]

    def merge_config(
        self,
        profile: str = "default",
        call_overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Profile overrides from insights.yaml
        3. Global defaults (lowest priority)
        """
        config = asdict(self.defaults)

        for layer in (self.load_profile_config(profile), call_overrides or {}):
            config = deep_merge(config, layer)

        return config

    def load(
        self,
        profile: str = "default",
        call_overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """Merge, validate and build a typed configuration.

        Raises:
            ConfigurationError: If any merged value fails validation
        """
        merged = self.merge_config(profile, call_overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            first = errors[0]
            raise ConfigurationError(
                f"Invalid configuration: {first.field}: {first.message} (got: {first.value})",
                field=first.field,
                context={"errors": [f"{err.field}: {err.message}" for err in errors]}
            )

        return build_config(merged)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base; nested dicts merge, other values replace."""
    merged = dict(base)

    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value

    return merged


def build_config(config: dict[str, Any]) -> DefaultConfig:
    """Build a DefaultConfig from a merged configuration dictionary.

    Unknown sections and keys are ignored; missing ones keep their defaults.
    """
    defaults = get_default_config()
    sections = {}

    for section in fields(DefaultConfig):
        default_section = getattr(defaults, section.name)
        overrides = config.get(section.name) or {}
        sections[section.name] = type(default_section)(**{
            f.name: overrides.get(f.name, getattr(default_section, f.name))
            for f in fields(default_section)
        })

    return DefaultConfig(**sections)
