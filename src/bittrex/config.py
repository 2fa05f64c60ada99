"""Configuration using pydantic-settings with environment variable loading."""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URI = "https://api.bittrex.com/v3"


class BittrexSettings(BaseSettings):
    """Bittrex v3 REST connection settings.

    Read from BITTREX_API_KEY, BITTREX_SECRET_KEY, BITTREX_BASE_URI,
    BITTREX_SUBACCOUNT_ID and BITTREX_TIMEOUT_SECONDS, in the environment or
    a .env file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="BITTREX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: SecretStr = SecretStr("")
    secret_key: SecretStr = SecretStr("")
    base_uri: str = DEFAULT_BASE_URI
    subaccount_id: str = ""
    timeout_seconds: float = 10.0

    @property
    def has_credentials(self) -> bool:
        """True when both halves of the API key pair are configured."""
        return bool(
            self.api_key.get_secret_value() and self.secret_key.get_secret_value()
        )


class AppSettings(BaseSettings):
    """Root settings for applications built on the client.

    The nested Bittrex settings are built when AppSettings is instantiated, so
    they see the environment and .env as they are at that moment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    bittrex: BittrexSettings = Field(default_factory=BittrexSettings)
