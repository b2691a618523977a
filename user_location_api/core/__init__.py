"""
Core configuration and utilities package
"""
from .config import settings, get_settings
from .database import get_db, get_session_maker, init_db

__all__ = [
    "settings",
    "get_settings",
    "get_db",
    "get_session_maker",
    "init_db"
]
