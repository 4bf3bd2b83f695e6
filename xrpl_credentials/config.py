"""Service configuration, sourced from the environment and an optional .env file."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from xrpl_credentials.ledger import DEFAULT_XRPL_ENDPOINT
from xrpl_credentials.signing.gateway import DEFAULT_API_URL, SigningOptions

# Browser origins allowed by CORS. Local development only.
ALLOWED_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]


class Settings(BaseSettings):
    """Runtime settings. Environment variable names match field names."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # HTTP
    host: str = "0.0.0.0"
    port: int = 3000

    # Ledger
    xrpl_endpoint: str = DEFAULT_XRPL_ENDPOINT

    # Signing service
    xumm_api_key: str = ""
    xumm_api_secret: str = ""
    xumm_api_url: str = DEFAULT_API_URL
    signing_submit: bool = True
    signing_expire: int = Field(default=300, gt=0)
    signing_timeout_seconds: float = Field(default=30.0, gt=0)

    log_level: str = "INFO"

    def signing_options(self) -> SigningOptions:
        return SigningOptions(submit=self.signing_submit, expire=self.signing_expire)


@lru_cache
def get_settings() -> Settings:
    return Settings()
