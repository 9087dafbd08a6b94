"""Customer repository: CRUD over the ``customers`` table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update

from salesctl.infrastructure.database.schema import customers

if TYPE_CHECKING:
    from sqlalchemy import Connection


class CustomerRepository:
    """Encapsulates SQL for customer reads and writes.

    Bound to the connection of an open store transaction; writes become
    durable when that transaction commits.
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def get_all(self) -> list[dict[str, Any]]:
        """All customer rows in insertion order."""
        rows = self._conn.execute(select(customers)).mappings().all()
        return [dict(row) for row in rows]

    def get_by_id(self, customer_id: str) -> dict[str, Any] | None:
        """Fetch one customer row by id."""
        row = (
            self._conn.execute(select(customers).where(customers.c.id == customer_id))
            .mappings()
            .first()
        )
        return dict(row) if row is not None else None

    def add(self, row: dict[str, Any]) -> None:
        self._conn.execute(insert(customers).values(**row))

    def update(self, customer_id: str, values: dict[str, Any]) -> int:
        """Overwrite columns of one customer. Returns rows affected."""
        result = self._conn.execute(
            update(customers).where(customers.c.id == customer_id).values(**values)
        )
        return result.rowcount

    def delete(self, customer_id: str) -> int:
        """Delete one customer. Returns rows affected."""
        result = self._conn.execute(delete(customers).where(customers.c.id == customer_id))
        return result.rowcount
