"""Database infrastructure module."""

from payment_lifecycle.shared.infrastructure.database.connection import (
    Base,
    get_db_session,
    init_db,
    close_db,
)

__all__ = ["Base", "get_db_session", "init_db", "close_db"]
