"""Database layer - session management, base models, and mixins."""

from resume_api.core.database.base import Base, TimestampMixin, UUIDMixin
from resume_api.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
)


__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
]
