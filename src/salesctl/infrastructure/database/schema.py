"""SQLAlchemy Core table definitions for the sales database.

Identifiers are UUID strings and timestamps are UTC ISO 8601 text, so
lexical order of ``created_date`` is chronological order.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, MetaData, Table, Text

metadata = MetaData()

companies = Table(
    "companies",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("address", Text),
    Column("phone", Text),
    Column("created_date", Text, nullable=False),
)

customers = Table(
    "customers",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("address", Text),
    Column("phone", Text),
    Column("email", Text),
    Column("company_id", Text, ForeignKey("companies.id"), nullable=False),
    Column("created_date", Text, nullable=False),
    Column("modified_date", Text, nullable=False),
)

# ---------------------------------------------------------------------------
# Indexes for frequently filtered columns
# ---------------------------------------------------------------------------

Index("ix_customers_company_id", customers.c.company_id)
Index("ix_customers_name", customers.c.name)
Index("ix_companies_name", companies.c.name)
