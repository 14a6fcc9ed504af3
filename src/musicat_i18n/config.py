"""Settings for bundle checks and logging.

Values come from ``MUSICAT_I18N_*`` environment variables or a local ``.env``.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from musicat_i18n.locales import available_locales


class I18nConfig(BaseSettings):
    """Settings shared by the library and the ``musicat-i18n`` CLI."""

    model_config = SettingsConfigDict(
        env_prefix="MUSICAT_I18N_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines instead of the console format",
    )

    # Conformance
    reference_locale: str = Field(
        default="en",
        description="Locale whose bundle defines the canonical key set",
    )
    strict: bool = Field(
        default=False,
        description="Treat conformance warnings as failures",
    )

    @field_validator("reference_locale")
    @classmethod
    def check_reference_locale(cls, value: str) -> str:
        """Reject reference locales that have no registered bundle."""
        if value not in available_locales():
            raise ValueError(
                f"reference_locale must be one of {available_locales()}, got {value!r}"
            )
        return value


# Default config instance
config = I18nConfig()
