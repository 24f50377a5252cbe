"""PostgreSQL access shared by the stores."""

from nuremento.db.errors import ConnectionError, StoreError
from nuremento.db.pool import PostgresPool

__all__ = ["ConnectionError", "PostgresPool", "StoreError"]
