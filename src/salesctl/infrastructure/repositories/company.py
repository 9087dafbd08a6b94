"""Company repository: lookups over the ``companies`` table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select

from salesctl.infrastructure.database.schema import companies

if TYPE_CHECKING:
    from sqlalchemy import Connection


class CompanyRepository:
    """Encapsulates SQL for company reads.

    ``add`` exists for company management only; the customer workflow
    never writes companies.
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def get_all(self) -> list[dict[str, Any]]:
        """All company rows ordered by name."""
        rows = self._conn.execute(select(companies).order_by(companies.c.name)).mappings().all()
        return [dict(row) for row in rows]

    def get_by_id(self, company_id: str) -> dict[str, Any] | None:
        """Fetch one company row by id."""
        row = (
            self._conn.execute(select(companies).where(companies.c.id == company_id))
            .mappings()
            .first()
        )
        return dict(row) if row is not None else None

    def add(self, row: dict[str, Any]) -> None:
        self._conn.execute(insert(companies).values(**row))
