"""SQLite order repository adapter.

Implements OrderRepositoryPort using SQLite with aiosqlite for async access.
The database assigns order ids through an autoincrement primary key.
"""

import asyncio
import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import aiosqlite

from checkout.core.models import Order, OrderDraft
from checkout.core.ports import OrderRepositoryPort

logger = logging.getLogger(__name__)


class SQLiteOrderRepository(OrderRepositoryPort):
    """SQLite-backed order repository with a single shared connection."""

    def __init__(self, db_path: str):
        """Initialize SQLite repository.

        Args:
            db_path: Path to SQLite database file.
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()
        self._schema_initialized = False

    async def _get_connection(self) -> aiosqlite.Connection:
        """Open the connection and create the schema on first use."""
        async with self._lock:
            if self._conn is None:
                self._conn = await aiosqlite.connect(str(self.db_path))
                self._conn.row_factory = aiosqlite.Row
            if not self._schema_initialized:
                await self._conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS orders (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        user_id INTEGER NOT NULL,
                        user_email TEXT NOT NULL,
                        items_json TEXT NOT NULL DEFAULT '[]',
                        total TEXT NOT NULL,
                        status TEXT NOT NULL,
                        created_at TIMESTAMP NOT NULL
                    )
                    """
                )
                await self._conn.execute(
                    "CREATE INDEX IF NOT EXISTS idx_orders_user ON orders(user_id)"
                )
                await self._conn.commit()
                self._schema_initialized = True
            return self._conn

    async def close(self) -> None:
        """Close the database connection."""
        async with self._lock:
            if self._conn is not None:
                await self._conn.close()
                self._conn = None
                self._schema_initialized = False

    async def save(self, draft: OrderDraft) -> Order:
        """Insert the order and return it with its assigned id."""
        conn = await self._get_connection()
        items_json = json.dumps(
            [{"name": item.name, "price": str(item.price)} for item in draft.cart.items]
        )
        cursor = await conn.execute(
            """
            INSERT INTO orders (user_id, user_email, items_json, total, status, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                draft.cart.user.id,
                draft.cart.user.email,
                items_json,
                str(draft.total),
                draft.status.value,
                datetime.now(UTC).isoformat(),
            ),
        )
        await conn.commit()
        order_id = cursor.lastrowid
        if order_id is None:
            raise RuntimeError("SQLite did not report an id for the inserted order")

        logger.debug(f"Persisted order {order_id} for user {draft.cart.user.id}")
        return Order(
            id=order_id,
            cart=draft.cart,
            total=draft.total,
            status=draft.status,
        )

    async def get_by_id(self, order_id: int) -> dict[str, Any] | None:
        """Return a stored order row, or None if it does not exist.

        The cart is stored denormalized, so rows are returned as plain
        dictionaries rather than Order objects.
        """
        conn = await self._get_connection()
        cursor = await conn.execute("SELECT * FROM orders WHERE id = ?", (order_id,))
        row = await cursor.fetchone()
        if row is None:
            return None
        try:
            return {
                "id": row["id"],
                "user_id": row["user_id"],
                "user_email": row["user_email"],
                "items": json.loads(row["items_json"]),
                "total": row["total"],
                "status": row["status"],
                "created_at": row["created_at"],
            }
        except (IndexError, KeyError, json.JSONDecodeError) as e:
            raise ValueError(f"Row parsing failed for order {order_id}: {e}") from e

    async def count(self) -> int:
        """Return the number of stored orders."""
        conn = await self._get_connection()
        cursor = await conn.execute("SELECT COUNT(*) FROM orders")
        row = await cursor.fetchone()
        return int(row[0]) if row else 0
