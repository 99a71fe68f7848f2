from __future__ import annotations

import os
from typing import Any, Dict

from . import logging as logging_config


class Settings:
    # JSON encoding
    JSON_DEPTH: int = int(os.getenv("COLLECTION_JSON_DEPTH", "512"))
    JSON_OPTIONS: int = int(os.getenv("COLLECTION_JSON_OPTIONS", "0"))

    # Logging
    LOG_CHANNEL: str = logging_config.default
    LOG_CHANNELS: Dict[str, Dict[str, Any]] = logging_config.channels
    LOG_LEVEL: str = logging_config.level
    LOG_FORMAT: str = logging_config.format
    LOG_DATE_FORMAT: str = logging_config.date_format


settings = Settings()
