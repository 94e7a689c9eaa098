"""
Configuration module for Pastebin Lite.
Loads environment variables and provides config objects.
"""
import os
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings:
    """Application settings loaded from environment variables.

    Keyword overrides take precedence over the environment, which lets tests
    build isolated settings without touching ``os.environ``.
    """

    def __init__(self, **overrides: Any):
        self.REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
        self.REDIS_PREFIX: str = os.getenv("REDIS_PREFIX", "paste")
        self.APP_DOMAIN: str = os.getenv("APP_DOMAIN", "")
        self.DEBUG: bool = _env_flag("DEBUG", "False")
        self.TEST_MODE: bool = _env_flag("TEST_MODE", "0")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ID_LENGTH: int = int(os.getenv("ID_LENGTH", "10"))

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)


settings = Settings()
