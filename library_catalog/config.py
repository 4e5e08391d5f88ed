import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _env_bool(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    # Application settings
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Library Catalog"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING"))

    # Notification settings
    # Allowed values: 'console' (default), 'log'
    notification_channel: str = field(default_factory=lambda: os.getenv("NOTIFICATION_CHANNEL", "console"))

    # Seed data settings
    seed_file: Optional[str] = field(default_factory=lambda: os.getenv("LIBRARY_SEED_FILE"))
    demo_subscribers: List[str] = field(default_factory=lambda: _env_list("DEMO_SUBSCRIBERS", "user01,user02"))

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


settings = Settings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("library_catalog")
    logger.setLevel((level or settings.effective_log_level).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
