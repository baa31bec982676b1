"""i18n provider configuration settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Language selection and persistence settings.

    Environment Variables:
        I18N_STORAGE_TYPE: Where the selected language is kept - 'local' or 'session'
        I18N_STORAGE_KEY: Key the selected language is stored under (default: i18nrs)
        I18N_DEFAULT_LANGUAGE: Language used when nothing is stored (default: en)
        I18N_STORAGE_PATH: File backing 'local' storage
        I18N_TRANSLATIONS_DIR: Optional directory of <code>.json / <code>.yml files
        I18N_PAYLOAD_FORMAT: Translation payload format - 'json' or 'yaml'

    Example:
        ```python
        from i18n_provider.core.config import get_settings

        settings = get_settings()
        storage_key = settings.i18n.storage_key
        ```
    """

    storage_type: str = Field(
        default="local",
        alias="I18N_STORAGE_TYPE",
        description="Storage backend for the selected language",
    )
    storage_key: str = Field(
        default="i18nrs",
        alias="I18N_STORAGE_KEY",
        description="Key used to persist the selected language",
    )
    default_language: str = Field(
        default="en",
        alias="I18N_DEFAULT_LANGUAGE",
        description="Language used when no language has been persisted",
    )
    storage_path: str = Field(
        default=".i18n_storage.json",
        alias="I18N_STORAGE_PATH",
        description="File backing the 'local' storage type",
    )
    translations_dir: Optional[str] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory holding one translation file per language",
    )
    payload_format: str = Field(
        default="json",
        alias="I18N_PAYLOAD_FORMAT",
        description="Structured-data format of the translation payloads",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("storage_type")
    @classmethod
    def validate_storage_type(cls, v: str) -> str:
        """Ensure the storage type is one of the supported backends."""
        value = v.lower()
        if value not in ("local", "session"):
            raise ValueError(f"storage_type must be 'local' or 'session', got '{v}'")
        return value

    @field_validator("payload_format")
    @classmethod
    def validate_payload_format(cls, v: str) -> str:
        """Ensure the payload format has a parser."""
        value = v.lower()
        if value not in ("json", "yaml"):
            raise ValueError(f"payload_format must be 'json' or 'yaml', got '{v}'")
        return value


class Settings(BaseSettings):
    """Root settings for the i18n provider.

    Attributes:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        i18n: Language selection and persistence settings
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
