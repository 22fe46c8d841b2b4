"""Member Groups API configuration settings."""

from typing import Annotated, Any, List, Optional
import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Server configuration settings."""

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    CORS_ALLOW_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:8000", "http://127.0.0.1:8000"],
        alias="CORS_ALLOW_ORIGINS",
    )
    SYSTEM_RATE_LIMIT: str = Field(default="50/minute", alias="SYSTEM_RATE_LIMIT")

    @field_validator("CORS_ALLOW_ORIGINS", mode="before")
    @classmethod
    def _parse_origins(cls, v: Optional[Any]) -> Any:
        """Parse CORS_ALLOW_ORIGINS from a JSON list or a comma separated string."""
        if v is None:
            return []
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                try:
                    return json.loads(s)
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(
                        f"Invalid CORS_ALLOW_ORIGINS JSON: {e} (value: {s[:80]}...)"
                    ) from e
            return [origin.strip() for origin in s.split(",") if origin.strip()]
        raise ValueError("CORS_ALLOW_ORIGINS must be a JSON list or a string")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class MemberGroupsSettings(BaseSettings):
    """Member groups feature configuration.

    Controls localization of save notifications, display defaults and the
    optional seed file used to populate the in-memory stores at startup.
    """

    DEFAULT_LOCALE: str = Field(
        default="en-US",
        alias="MEMBER_GROUPS_DEFAULT_LOCALE",
        description="Locale used when Accept-Language does not match",
    )
    SUPPORTED_LOCALES: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["en-US", "fr-FR"],
        alias="MEMBER_GROUPS_SUPPORTED_LOCALES",
    )
    SEED_FILE: Optional[str] = Field(
        default=None,
        alias="MEMBER_GROUPS_SEED_FILE",
        description="YAML file with groups to load into the stores on startup",
    )
    DEFAULT_ICON: str = Field(default="icon-users", alias="MEMBER_GROUPS_ICON")
    ROOT_PARENT_ID: int = Field(default=-1, alias="MEMBER_GROUPS_ROOT_PARENT_ID")

    @field_validator("SUPPORTED_LOCALES", mode="before")
    @classmethod
    def _parse_locales(cls, v: Optional[Any]) -> Any:
        if v is None:
            return ["en-US"]
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                return json.loads(s)
            return [locale.strip() for locale in s.split(",") if locale.strip()]
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Member Groups API configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Server settings
    server: ServerSettings

    # Functionality settings
    member_groups: MemberGroupsSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "server": ServerSettings,
            "member_groups": MemberGroupsSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
