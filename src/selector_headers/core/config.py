"""Configuration management.

Loads from TOML config files + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from .errors import ConfigError
from .naming import IdentifierRules


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class IdentifierConfig(BaseModel):
    extra_start_chars: str = "_$"  # Symbols allowed alongside letters
    unicode_letters: bool = False  # Accept non-ASCII letters and digits
    eligibility_marker: str = "."  # Only names containing this are transformed

    @field_validator("eligibility_marker")
    @classmethod
    def _marker_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("eligibility_marker must not be empty")
        return v

    def rules(self) -> IdentifierRules:
        return IdentifierRules.from_characters(
            extra_start_chars=self.extra_start_chars,
            unicode_letters=self.unicode_letters,
        )


class MessagingConfig(BaseModel):
    base_url: str = ""  # Prefix for resource URLs in message bodies
    destination: str = "fedora"


class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "console"  # "json" or "console"
    max_recorded_failures: int = Field(default=1000, ge=0)  # Per decorator instance


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level application settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    identifiers: IdentifierConfig = Field(default_factory=IdentifierConfig)
    messaging: MessagingConfig = Field(default_factory=MessagingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "SELECTOR_HEADERS_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.

    Raises:
        ConfigError: The file is not valid TOML or a value fails validation.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            with open(path, "rb") as f:
                try:
                    data = tomli.load(f)
                except tomli.TOMLDecodeError as exc:
                    raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    if overrides:
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
