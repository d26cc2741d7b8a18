"""Configuration management for the budget tracker.

This module centralizes all configuration values including the backend
URL, mock mode, timeouts and logging, with environment variable
overrides.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from loguru import logger

_TRUTHY = {'1', 'true', 'yes', 'on'}

# Backend
API_URL = os.getenv(
    "BUDGETBUDDY_API_URL",
    "https://finance-app-backend-vmt5.onrender.com/api/transactions",
).rstrip("/")
USE_MOCK_DATA = os.getenv("BUDGETBUDDY_USE_MOCK", "").strip().lower() in _TRUTHY
REQUEST_TIMEOUT = float(os.getenv("BUDGETBUDDY_REQUEST_TIMEOUT", "10"))

# Mock mode
MOCK_LATENCY_SECONDS = float(os.getenv("BUDGETBUDDY_MOCK_LATENCY", "0.8"))

# Logging
LOG_LEVEL = os.getenv("BUDGETBUDDY_LOG_LEVEL", "INFO").upper()
LOG_FILE: Optional[str] = os.getenv("BUDGETBUDDY_LOG_FILE") or None
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

_LOGGING_CONFIGURED = False


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Install the loguru sinks once per process.

    Streamlit re-executes the page script on every interaction, so repeat
    calls are ignored.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return
    level = (level or LOG_LEVEL).upper()
    log_file = log_file or LOG_FILE
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)
    if log_file:
        logger.add(log_file, rotation="1 day", retention="7 days", level=level)
    _LOGGING_CONFIGURED = True


def get_api_url() -> str:
    """Get the backend collection URL."""
    return API_URL


def use_mock_data() -> bool:
    """Whether the in-memory backend should be used instead of the REST one."""
    return USE_MOCK_DATA
