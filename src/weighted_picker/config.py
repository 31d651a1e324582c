"""Configuration system for weighted-picker.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (PICKER_*) -> .env file -> field defaults.

Command-line overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any, Literal, get_args

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from weighted_picker.exceptions import ConfigValidationError

LogLevel = Literal["none", "summary", "full"]

LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class PickerConfig(BaseSettings):
    """Configuration for weighted-picker.

    Resolution order: init kwargs -> env vars (PICKER_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="PICKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    random_source_type: str = Field(
        default="system",
        description="Random source identifier: 'system' or 'seeded'",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Seed for sources that accept one (None = unseeded)",
    )
    log_level: LogLevel = Field(
        default="none",
        description="Draw logging verbosity: 'none', 'summary', 'full'",
    )


_ALL_FIELDS: frozenset[str] = frozenset(PickerConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Check override keys without creating a config.

    Args:
        overrides: Field name to value mapping.

    Raises:
        ConfigValidationError: If any key is not a config field.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{key}'")


def resolve_config(
    defaults: PickerConfig,
    overrides: dict[str, Any] | None,
) -> PickerConfig:
    """Create a new config instance merging defaults with overrides.

    Overrides whose value is ``None`` are treated as "not given" so that
    unset command-line options leave the environment value in place.

    Args:
        defaults: The base configuration loaded from the environment.
        overrides: Field name to value mapping, typically from the CLI.

    Returns:
        A new PickerConfig with overrides applied, or *defaults* itself if
        nothing was overridden.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    given = {key: value for key, value in overrides.items() if value is not None}
    if not given:
        return defaults

    # model_validate (not model_copy) so values are type-coerced and checked.
    merged = defaults.model_dump()
    merged.update(given)
    try:
        return PickerConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def load_config() -> PickerConfig:
    """Load the configuration from the environment and ``.env`` file.

    Raises:
        ConfigValidationError: If an environment value fails validation.
    """
    try:
        return PickerConfig()
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
