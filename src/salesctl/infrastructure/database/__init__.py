"""SQLite database engine and schema via SQLAlchemy Core."""

from salesctl.infrastructure.database.engine import create_db_engine, init_database
from salesctl.infrastructure.database.schema import companies, customers, metadata

__all__ = [
    "companies",
    "create_db_engine",
    "customers",
    "init_database",
    "metadata",
]
