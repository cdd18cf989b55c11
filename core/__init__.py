"""
Core module containing configuration, logging, database and exceptions.
"""

from .config import Settings, get_settings
from .exceptions import NoteNotFoundError
from .logger import logger

__all__ = [
    "Settings",
    "get_settings",
    "logger",
    "NoteNotFoundError",
]
