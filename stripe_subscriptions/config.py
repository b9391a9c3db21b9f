import os
import logging
from pydantic_settings import BaseSettings
from pydantic import model_validator
from typing import Optional

from dotenv import dotenv_values


logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.stripe.com/v1"


def _env_or_dotenv(key: str, dotenv_path: str = ".env") -> Optional[str]:
    """Get a value from env var (if non-empty) or from .env file.

    Pydantic-settings prefers env vars over .env files. If the env var
    is set to an empty string, pydantic treats it as the actual value and
    ignores the .env file. This helper lets empty env vars fall through to
    the .env file value.
    """
    val = os.environ.get(key)
    if val:  # non-empty env var wins
        return val
    vals = dotenv_values(dotenv_path)
    return vals.get(key) or None


class Settings(BaseSettings):
    # Credentials
    stripe_api_key: Optional[str] = None
    stripe_account: Optional[str] = None

    # API
    stripe_api_base: str = DEFAULT_API_BASE
    stripe_api_version: Optional[str] = None

    # Transport
    request_timeout: float = 60.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @model_validator(mode="after")
    def _resolve_empty_env_vars(self) -> "Settings":
        """Fix empty env vars overriding .env file values."""
        optional_keys = [
            "stripe_api_key",
            "stripe_account",
            "stripe_api_version",
        ]
        for key in optional_keys:
            if not getattr(self, key):
                val = _env_or_dotenv(key.upper())
                if val:
                    object.__setattr__(self, key, val)
        if not self.stripe_api_key:
            logger.warning("No Stripe API key configured (set STRIPE_API_KEY)")
        return self


def get_settings() -> Settings:
    """Load settings from the environment and ``.env``."""
    return Settings()
