"""
Core module - Error taxonomy and logging setup.
"""
from mongobrowser.core.errors import (
    BrowserError,
    ConnectFailure,
    SessionNotFound,
    QueryFailure,
    CloseFailure,
    browser_error_handler,
)
from mongobrowser.core.logging import setup_logging

__all__ = [
    "BrowserError",
    "ConnectFailure",
    "SessionNotFound",
    "QueryFailure",
    "CloseFailure",
    "browser_error_handler",
    "setup_logging",
]
