# This project was developed with assistance from AI tools.
"""Table store backed by Supabase (PostgREST).

Routes talk to the remote tables only through ``TableStore``: select, insert,
update and delete keyed by a single equality filter. The supabase-py client is
synchronous, so every call runs in the default thread-pool executor. The
module exposes a singleton initialised at app startup via ``init_store()``
and handed to routes by the ``get_store`` dependency.
"""

import asyncio
import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from ..core.config import Settings

logger = logging.getLogger(__name__)

# PostgREST: ``.single()`` matched zero (or more than one) rows
NO_ROWS_CODE = "PGRST116"

PRODUCTS_TABLE = "products"
TERMS_TABLE = "terms"

Row = dict[str, Any]


class StoreError(Exception):
    """Any failure talking to the remote store."""


class RecordNotFoundError(StoreError):
    """A single-row lookup matched no row."""

    def __init__(self, table: str, column: str, value: Any):
        self.table = table
        self.column = column
        self.value = value
        super().__init__(f"No row in {table} where {column}={value!r}")


class TableStore:
    """Thin async wrapper around a supabase-py client."""

    def __init__(self, client: Client):
        self._client = client

    async def _run(self, query) -> Any:
        """Execute a built query off the event loop and return its data."""
        loop = asyncio.get_running_loop()
        try:
            response = await loop.run_in_executor(None, query.execute)
        except (APIError, httpx.HTTPError) as exc:
            raise StoreError(str(exc)) from exc
        return response.data

    async def select_all(self, table: str) -> list[Row]:
        """Return every row of ``table``."""
        return await self._run(self._client.table(table).select("*"))

    async def select_one(self, table: str, column: str, value: Any) -> Row:
        """Return the single row where ``column == value``.

        Raises:
            RecordNotFoundError: no row matched.
            StoreError: any other client failure.
        """
        query = self._client.table(table).select("*").eq(column, value).single()
        try:
            return await self._run(query)
        except StoreError as exc:
            cause = exc.__cause__
            if isinstance(cause, APIError) and cause.code == NO_ROWS_CODE:
                raise RecordNotFoundError(table, column, value) from cause
            raise

    async def insert(self, table: str, row: Row) -> Row:
        """Insert one row and return the stored representation."""
        data = await self._run(self._client.table(table).insert(row))
        if not data:
            raise StoreError(f"Insert into {table} returned no rows")
        return data[0]

    async def update(self, table: str, column: str, value: Any, changes: Row) -> Row | None:
        """Update rows where ``column == value``; return the first, or None if none matched."""
        data = await self._run(self._client.table(table).update(changes).eq(column, value))
        return data[0] if data else None

    async def delete(self, table: str, column: str, value: Any) -> None:
        """Delete rows where ``column == value``."""
        await self._run(self._client.table(table).delete().eq(column, value))


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_store: TableStore | None = None


def init_store(cfg: Settings) -> TableStore:
    """Initialise the singleton (called once from app lifespan)."""
    global _store  # noqa: PLW0603
    client = create_client(cfg.SUPABASE_URL, cfg.SUPABASE_KEY)
    _store = TableStore(client)
    logger.info("TableStore initialised (url=%s)", cfg.SUPABASE_URL)
    return _store


def get_store() -> TableStore:
    """Return the initialised TableStore singleton (FastAPI dependency)."""
    if _store is None:
        raise RuntimeError("TableStore not initialised -- call init_store() first")
    return _store
