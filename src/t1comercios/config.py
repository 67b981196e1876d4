"""Client configuration via pydantic-settings.

Values are read once and never change afterwards. Precedence:
constructor kwargs > environment (``T1_*``) > ``.env`` > ``config.json`` > defaults.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_BASE_URL = "https://api.t1comercios.com"
DEFAULT_AUTH_URL = (
    "https://loginclaro.com/auth/realms/plataforma-claro/protocol/openid-connect/token"
)
DEFAULT_CLIENT_ID = "integradores"
DEFAULT_USER_AGENT = "t1comercios/0.1.0"


class T1Settings(BaseSettings):
    base_url: str = DEFAULT_BASE_URL
    auth_url: str = DEFAULT_AUTH_URL
    client_id: str = DEFAULT_CLIENT_ID
    username: str = ""
    password: SecretStr = SecretStr("")
    commerce_id: str | None = None

    # Renew this many seconds before the server-reported expiry.
    expiry_skew_seconds: int = Field(default=60, ge=0)
    http_timeout_ms: int = Field(default=10000, gt=0)

    user_agent: str = DEFAULT_USER_AGENT
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="T1_",
        env_file=".env",
        json_file="config.json",
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("base_url", "auth_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def timeout_seconds(self) -> float:
        return self.http_timeout_ms / 1000

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password.get_secret_value())

    @property
    def masked_username(self) -> str:
        user = self.username
        if len(user) > 4:
            return f"{user[:2]}***{user[-2:]}"
        return "***"

    def describe(self) -> dict[str, Any]:
        """Secret-free summary of the active configuration."""
        return {
            "base_url": self.base_url,
            "auth_url": self.auth_url,
            "client_id": self.client_id,
            "commerce_id": self.commerce_id,
            "timeout_ms": self.http_timeout_ms,
            "expiry_skew_seconds": self.expiry_skew_seconds,
            "user": self.masked_username,
        }


def load_settings(**overrides: Any) -> T1Settings:
    """Build a fresh settings instance; keyword overrides win over every source."""
    return T1Settings(**overrides)
