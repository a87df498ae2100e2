# ABOUTME: Configuration management for Cognito to SSM credential sync
# ABOUTME: Handles profiles, environment overrides and required-field validation

"""Configuration management for credential sync."""

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

from .errors import ConfigurationError
from .utils.validators import validate_aws_region, validate_parameter_name, validate_tier, validate_user_pool_id

REQUIRED_FIELDS = ("user_pool_id", "app_client_name", "parameter_name")

ENV_PREFIX = "COGNITO_SSM_SYNC_"

# Keys used by the serverless plugin configuration block
LEGACY_KEYS = {
    "userPoolId": "user_pool_id",
    "appClientName": "app_client_name",
    "parameterName": "parameter_name",
    "kmsKeyId": "kms_key_id",
    "strictRead": "strict_read",
    "dryRun": "dry_run",
    "awsProfile": "aws_profile",
}


@dataclass
class SyncConfig:
    """Settings for one credential sync."""

    user_pool_id: str | None = None
    app_client_name: str | None = None
    parameter_name: str | None = None
    region: str | None = None  # Defaults to the boto3 session region
    aws_profile: str | None = None
    secure: bool = True  # SecureString; False stores a plain String like the serverless plugin
    kms_key_id: str | None = None
    tier: str = "Standard"
    strict_read: bool = False  # Fail instead of overwriting when the parameter cannot be read
    dry_run: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SyncConfig":
        """Create config from dictionary, accepting the plugin's camelCase keys."""
        data = dict(data or {})
        for legacy, current in LEGACY_KEYS.items():
            if legacy in data:
                value = data.pop(legacy)
                data.setdefault(current, value)

        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def with_overrides(self, **overrides: Any) -> "SyncConfig":
        """Return a copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    def validate(self) -> None:
        """Check required fields and value formats.

        Raises:
            ConfigurationError: listing every missing field, or the first malformed one
        """
        missing = self.missing_fields()
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}",
                missing_fields=missing,
                parameter_name=self.parameter_name,
            )

        if not validate_user_pool_id(self.user_pool_id):
            raise ConfigurationError(f"Invalid user pool id: {self.user_pool_id}")
        if not validate_parameter_name(self.parameter_name):
            raise ConfigurationError(f"Invalid parameter name: {self.parameter_name}")
        if self.region and not validate_aws_region(self.region):
            raise ConfigurationError(f"Invalid AWS region: {self.region}")
        if not validate_tier(self.tier):
            raise ConfigurationError(f"Invalid parameter tier: {self.tier}")


def env_overrides(environ: dict[str, str] = None) -> dict[str, Any]:
    """Read overrides from COGNITO_SSM_SYNC_* environment variables."""
    environ = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}
    for name in ("user_pool_id", "app_client_name", "parameter_name", "region", "aws_profile", "kms_key_id"):
        value = environ.get(ENV_PREFIX + name.upper())
        if value:
            overrides[name] = value
    return overrides


class Config:
    """Configuration manager holding named sync profiles."""

    CONFIG_DIR = Path.home() / ".cognito-ssm-sync"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self):
        """Initialize configuration."""
        self.profiles: dict[str, SyncConfig] = {}
        self.default_profile: str | None = None

    @classmethod
    def load(cls, path: str | Path | None = None) -> "Config":
        """Load configuration from file.

        The file holds ``{"default_profile": ..., "profiles": {name: {...}}}``.
        A missing file yields an empty configuration.

        Raises:
            ConfigurationError: The file exists but cannot be parsed
        """
        config = cls()
        config_file = Path(path) if path else cls.CONFIG_FILE

        if not config_file.exists():
            if path:
                raise ConfigurationError(f"Configuration file not found: {config_file}")
            return config

        try:
            with open(config_file) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not load config {config_file}: {e}")

        for profile_name, profile_data in data.get("profiles", {}).items():
            config.profiles[profile_name] = SyncConfig.from_dict(profile_data)

        config.default_profile = data.get("default_profile")
        if not config.default_profile and len(config.profiles) == 1:
            config.default_profile = next(iter(config.profiles))

        return config

    def get_profile(self, name: str | None = None) -> SyncConfig | None:
        """Get a profile by name or the default profile."""
        if name:
            return self.profiles.get(name)
        elif self.default_profile:
            return self.profiles.get(self.default_profile)
        return None

    def list_profiles(self) -> list[str]:
        """List all profile names."""
        return list(self.profiles.keys())


def load_sync_config(path: str | Path | None = None, profile: str | None = None, **overrides: Any) -> SyncConfig:
    """Resolve sync settings from the config file, environment and explicit overrides.

    Later sources win: profile, then COGNITO_SSM_SYNC_* variables, then ``overrides``.

    Raises:
        ConfigurationError: The config file is unreadable or the named profile does not exist
    """
    config = Config.load(path)
    settings = config.get_profile(profile)
    if settings is None:
        if profile:
            available = ", ".join(config.list_profiles()) or "none"
            raise ConfigurationError(f"Profile '{profile}' not found (available: {available})")
        settings = SyncConfig()

    return settings.with_overrides(**env_overrides()).with_overrides(**overrides)
