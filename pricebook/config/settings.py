"""Root settings model for pricebook configuration."""

from typing import Any, ClassVar

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from pricebook.config.models.observability import LogLevel, ObservabilityConfig
from pricebook.config.models.records import RecordRulesConfig


class Settings(BaseSettings):
    """Root configuration object.

    Values resolve from, highest priority first: constructor arguments,
    PRICEBOOK_* environment variables, the TOML files handed over through
    ``from_files``, then the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRICEBOOK_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    file_config: ClassVar[dict[str, Any]] = {}

    app_name: str = Field(default="pricebook", description="Application name for logging")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: LogLevel = Field(default="INFO", description="Logging level")

    records: RecordRulesConfig = Field(
        default_factory=RecordRulesConfig,
        description="Record validation and update rules",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def from_files(cls, file_config: dict[str, Any]) -> "Settings":
        """Build settings layered over already-merged TOML content."""
        cls.file_config = file_config
        try:
            return cls()
        finally:
            cls.file_config = {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            InitSettingsSource(settings_cls, init_kwargs=dict(cls.file_config)),
        )
