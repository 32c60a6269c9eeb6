"""User configuration models."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from zmkview.keymap.models import KeymapMetadata


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class KeymapMetadataDefaults(BaseModel):
    """Metadata stamped onto every parsed keymap."""

    name: str = Field(default="Parsed ZMK Keymap", description="Keymap name")
    version: str = Field(default="1.0.0", description="Keymap version")
    layout: str = Field(default="ZMK", description="Layout family")

    def to_metadata(self, total_keys: int) -> KeymapMetadata:
        return KeymapMetadata(
            name=self.name,
            version=self.version,
            layout=self.layout,
            total_keys=total_keys,
        )


class UserConfigData(BaseSettings):
    """User configuration data model with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables
    2. Constructor arguments (file data)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ZMKVIEW_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override file configuration."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level")
    log_file: Path | None = Field(default=None, description="Optional JSON log file")
    json_logs: bool = Field(default=False, description="Render console logs as JSON")

    # Parsing
    metadata: KeymapMetadataDefaults = Field(default_factory=KeymapMetadataDefaults)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        upper_v = v.strip().upper()
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return upper_v

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_log_file(cls, v: Any) -> Path | None:
        if v is None or v == "":
            return None
        return Path(v).expanduser()
