"""Base repository over an aiosqlite connection."""
from typing import Any

import aiosqlite


class AsyncRepository:
    """Async base repository class.

    Subclasses write SQL; this class runs it and hands rows back as dicts.
    Writes are committed explicitly with ``_commit``.
    """

    def __init__(self, connection: aiosqlite.Connection):
        self._conn = connection

    async def _execute(self, sql: str, parameters: tuple = ()) -> aiosqlite.Cursor:
        return await self._conn.execute(sql, parameters)

    async def _execute_many(self, sql: str, parameters_list: list[tuple]) -> aiosqlite.Cursor:
        return await self._conn.executemany(sql, parameters_list)

    async def _commit(self) -> None:
        await self._conn.commit()

    async def _fetchone(self, sql: str, parameters: tuple = ()) -> dict | None:
        """First row as a dict, or None when the query matches nothing."""
        cursor = await self._execute(sql, parameters)
        row = await cursor.fetchone()
        return dict(row) if row else None

    async def _fetchall(self, sql: str, parameters: tuple = ()) -> list[dict]:
        cursor = await self._execute(sql, parameters)
        return [dict(row) for row in await cursor.fetchall()]

    async def _fetchvalue(self, sql: str, parameters: tuple = ()) -> Any:
        """First column of the first row (aggregates such as COUNT)."""
        cursor = await self._execute(sql, parameters)
        row = await cursor.fetchone()
        return row[0] if row else None
