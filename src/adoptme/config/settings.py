"""
Configuration settings for the AdoptMe Backend
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    """Parse a boolean flag from the environment"""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got '{raw}'")


@dataclass
class Settings:
    """Runtime configuration for one application instance"""
    port: int = 8080
    mongodb_url: Optional[str] = None
    mongodb_database: str = "adoptme"
    mongodb_timeout_ms: int = 5000
    docs_enabled: bool = True
    auto_listen: bool = True
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])

    def validate(self) -> "Settings":
        """Fail fast on configuration the server cannot start without"""
        if not self.mongodb_url:
            raise ValueError("MONGODB_URL environment variable is required")
        if not 0 < self.port < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {self.port}")
        return self


def load_settings() -> Settings:
    """Build settings from the process environment"""
    settings = Settings(
        port=int(os.getenv("PORT", 8080)),
        mongodb_url=os.getenv("MONGODB_URL"),
        mongodb_database=os.getenv("MONGODB_DATABASE", "adoptme"),
        mongodb_timeout_ms=int(os.getenv("MONGODB_TIMEOUT_MS", 5000)),
        docs_enabled=_env_bool("DOCS_ENABLED", True),
        auto_listen=_env_bool("AUTO_LISTEN", True),
        allowed_origins=[
            origin.strip()
            for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
            if origin.strip()
        ],
    )

    logger.info(
        f"Settings loaded - database: {settings.mongodb_database}, "
        f"docs: {settings.docs_enabled}, auto_listen: {settings.auto_listen}"
    )
    return settings
