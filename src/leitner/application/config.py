import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LeitnerConfig(BaseSettings):
    """
    Configuration for the scheduling core.
    Supports loading from:
    1. Environment variables (LEITNER_*)
    2. Config file (~/.config/leitner/config.toml)
    3. Explicit overrides
    """

    model_config = SettingsConfigDict(
        env_prefix="LEITNER_",
        extra="ignore",
    )

    # Raise on cards missing from (or duplicated across) buckets
    strict: bool = True
    log_level: str = "INFO"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        from pydantic_settings import TomlConfigSettingsSource

        # Read at call time so tests can point HOME elsewhere
        toml_file = Path.home() / ".config/leitner/config.toml"

        if toml_file.exists():
            return (
                init_settings,
                env_settings,
                TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            )
        return (init_settings, env_settings)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


def resolve_config(overrides: dict[str, Any] | None = None) -> LeitnerConfig:
    """
    Multi-layered configuration resolution.
    1. Defaults in LeitnerConfig
    2. ~/.config/leitner/config.toml (if exists)
    3. Environment variables (LEITNER_*)
    4. overrides (None values are ignored)
    """
    clean = {k: v for k, v in (overrides or {}).items() if v is not None}
    return LeitnerConfig(**clean)


def configure_logging(config: LeitnerConfig) -> None:
    """Route log output to stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )
