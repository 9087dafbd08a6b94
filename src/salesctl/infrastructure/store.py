"""Store: unit of work over the sales database.

The Store is the single dependency injected into every service. It owns
the database engine and hands out repositories bound to one connection.
The :meth:`transaction` context manager is the whole unit of work:
fetch, validate, mutate and commit happen inside one scope, and any
exception rolls every write in that scope back.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from salesctl.infrastructure.database import init_database
from salesctl.infrastructure.repositories import CompanyRepository, CustomerRepository

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from salesctl.config.settings import SalesSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# StoreTransaction: yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class StoreTransaction:
    """Active transaction context with repositories sharing one connection."""

    conn: Connection
    customers: CustomerRepository = field(init=False, repr=False)
    companies: CompanyRepository = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.customers = CustomerRepository(self.conn)
        self.companies = CompanyRepository(self.conn)


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class Store:
    """Owns the engine and coordinates transactions.

    Constructed lazily by the CLI from :class:`SalesSettings`. Services
    receive the Store via their :class:`BaseService` constructor.
    """

    def __init__(self, settings: SalesSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(self.db_path, echo=settings.database.echo)

    @property
    def root(self) -> Path:
        """The project root directory."""
        return self._settings.project_root

    @property
    def db_path(self) -> Path:
        """Resolved database file (relative config paths hang off the root)."""
        path = Path(self._settings.database.path)
        if not path.is_absolute():
            path = self.root / path
        return path

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def settings(self) -> SalesSettings:
        """The resolved settings for this store."""
        return self._settings

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """One unit of work.

        Uses native SQLAlchemy ``engine.begin()``: commit when the block
        exits normally, rollback when it raises. Returning early from the
        block commits whatever was written so far, so validation failures
        must be detected before the first write.

        Usage::

            with store.transaction() as txn:
                row = txn.customers.get_by_id(customer_id)
                txn.customers.update(customer_id, values)
                # Committed here; rolled back if anything above raised.
        """
        with self._engine.begin() as conn:
            try:
                yield StoreTransaction(conn=conn)
            except BaseException:
                logger.debug("Rolling back store transaction", exc_info=True)
                raise
