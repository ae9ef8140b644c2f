"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Collection file settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    file: Path = Field(
        default=Path("collection.json"), validation_alias=AliasChoices("TONGUE_FILE")
    )
    indent: int = Field(default=2, validation_alias=AliasChoices("TONGUE_INDENT"))

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: int) -> int:
        """Validate JSON indentation"""
        if v < 0:
            raise ValueError("Indent cannot be negative")
        return v


class DisplaySettings(BaseSettings):
    """Default display suppression flags"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    no_native: bool = Field(
        default=False, validation_alias=AliasChoices("TONGUE_NO_NATIVE")
    )
    no_foreign: bool = Field(
        default=False, validation_alias=AliasChoices("TONGUE_NO_FOREIGN")
    )


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    level: str = Field(default="WARNING", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    store: StoreSettings = Field(default_factory=StoreSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    verbose: bool = Field(default=False, validation_alias=AliasChoices("TONGUE_VERBOSE"))
    debug: bool = Field(default=False, validation_alias=AliasChoices("TONGUE_DEBUG"))


# Global settings instance
settings = AppSettings()
