"""Storage module for the persisted credential and preferences."""

from .database import DatabasePreferenceStore, get_engine, get_session, init_db, reset_engine
from .memory import MemoryPreferenceStore
from .models import Preference

__all__ = [
    "DatabasePreferenceStore",
    "MemoryPreferenceStore",
    "Preference",
    "get_engine",
    "get_session",
    "init_db",
    "reset_engine",
]
