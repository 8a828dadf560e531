# pgedge_router/services/database.py
"""Database connection services."""

import asyncpg
from typing import Any, Awaitable, Callable, Protocol, Sequence


class QueryableConnection(Protocol):
    """The part of a driver connection the router relies on."""

    async def fetch(self, query: str, *args: Any) -> Sequence[Any]:
        ...


Connector = Callable[..., Awaitable[Any]]


async def open_connection(**config: Any) -> asyncpg.Connection:
    """Open a PostgreSQL connection.

    Args:
        **config: Keyword arguments for ``asyncpg.connect`` (host, port,
            user, password, database, ssl, timeout, ...).

    Returns:
        An open asyncpg connection.
    """
    return await asyncpg.connect(**config)


async def close_connection(conn: asyncpg.Connection) -> None:
    """Close a connection.

    Args:
        conn: The connection to close.
    """
    await conn.close()
