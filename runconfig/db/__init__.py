"""Database models and session management."""

from .models import Base, StoredRunConfiguration
from .session import get_session, init_db, close_db

__all__ = [
    "Base",
    "StoredRunConfiguration",
    "get_session",
    "init_db",
    "close_db",
]
