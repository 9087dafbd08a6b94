"""Customer transfer shapes, explicit mapping, and list ordering.

Rows coming out of the repositories are plain mappings keyed by column
name. Every conversion between a row and a transfer object is spelled out
field by field below, so the contract of each shape stays visible:

- ``to_list_dto()`` / ``to_detail_dto()``: row -> read shapes.
- ``new_customer_row()``: create request -> insertable row.
- ``update_values()``: update request -> column overwrite set.

``company_name`` is denormalized. It is never stored; the service fills it
after mapping via :func:`with_company_name`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, Field

from salesctl.domain.types import SortOrder

# ---------------------------------------------------------------------------
# Read shapes
# ---------------------------------------------------------------------------


class CustomerListDTO(BaseModel):
    """One row of the customer list view."""

    model_config = {"frozen": True}

    id: str
    name: str
    phone: str | None = None
    company_id: str
    company_name: str | None = None
    created_date: str


class CustomerDTO(BaseModel):
    """Full customer detail."""

    model_config = {"frozen": True}

    id: str
    name: str
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    company_id: str
    company_name: str | None = None
    created_date: str
    modified_date: str


# ---------------------------------------------------------------------------
# Write shapes
# ---------------------------------------------------------------------------


class CustomerCreateDTO(BaseModel):
    """Fields accepted when adding a customer."""

    model_config = {"frozen": True, "str_strip_whitespace": True}

    name: str = Field(min_length=1)
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    company_id: str = Field(min_length=1)


class CustomerUpdateDTO(CustomerCreateDTO):
    """Fields accepted when updating a customer (full overwrite)."""

    id: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def to_list_dto(row: Mapping[str, Any]) -> CustomerListDTO:
    return CustomerListDTO(
        id=str(row["id"]),
        name=str(row["name"]),
        phone=row["phone"],
        company_id=str(row["company_id"]),
        created_date=str(row["created_date"]),
    )


def to_detail_dto(row: Mapping[str, Any]) -> CustomerDTO:
    return CustomerDTO(
        id=str(row["id"]),
        name=str(row["name"]),
        address=row["address"],
        phone=row["phone"],
        email=row["email"],
        company_id=str(row["company_id"]),
        created_date=str(row["created_date"]),
        modified_date=str(row["modified_date"]),
    )


def new_customer_row(
    request: CustomerCreateDTO,
    *,
    customer_id: str,
    now: str,
) -> dict[str, Any]:
    """Build the insertable row for a new customer."""
    return {
        "id": customer_id,
        "name": request.name,
        "address": request.address,
        "phone": request.phone,
        "email": request.email,
        "company_id": request.company_id,
        "created_date": now,
        "modified_date": now,
    }


def update_values(request: CustomerUpdateDTO, *, now: str) -> dict[str, Any]:
    """Column overwrite set for an update.

    ``id`` and ``created_date`` are immutable and never part of the set.
    """
    return {
        "name": request.name,
        "address": request.address,
        "phone": request.phone,
        "email": request.email,
        "company_id": request.company_id,
        "modified_date": now,
    }


_DTO = TypeVar("_DTO", CustomerListDTO, CustomerDTO)


def with_company_name(dto: _DTO, company_name: str | None) -> _DTO:
    """Return *dto* with the denormalized company name filled in."""
    if company_name is None:
        return dto
    return dto.model_copy(update={"company_name": company_name})


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def parse_sort_order(value: str | None) -> SortOrder | None:
    """Case-insensitive lookup of a sort key. Unknown keys return None."""
    if not value:
        return None
    try:
        return SortOrder(value.strip().lower())
    except ValueError:
        return None


def sort_customers(
    items: list[CustomerListDTO],
    sort_order: SortOrder | None,
) -> list[CustomerListDTO]:
    """Order list rows. ``None`` leaves the input order untouched.

    Sorting is stable; names compare case-insensitively.
    """
    if sort_order is SortOrder.DATE:
        return sorted(items, key=lambda c: c.created_date, reverse=True)
    if sort_order is SortOrder.DATE_DESC:
        return sorted(items, key=lambda c: c.created_date)
    if sort_order is SortOrder.ALPHABETICAL:
        return sorted(items, key=lambda c: c.name.casefold())
    if sort_order is SortOrder.ALPHABETICAL_DESC:
        return sorted(items, key=lambda c: c.name.casefold(), reverse=True)
    return list(items)
