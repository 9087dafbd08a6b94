"""Company transfer shapes and mapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field


class CompanyDTO(BaseModel):
    """A company as seen by callers."""

    model_config = {"frozen": True}

    id: str
    name: str
    address: str | None = None
    phone: str | None = None
    created_date: str


class CompanyCreateDTO(BaseModel):
    """Fields accepted when adding a company."""

    model_config = {"frozen": True, "str_strip_whitespace": True}

    name: str = Field(min_length=1)
    address: str | None = None
    phone: str | None = None


def to_company_dto(row: Mapping[str, Any]) -> CompanyDTO:
    return CompanyDTO(
        id=str(row["id"]),
        name=str(row["name"]),
        address=row["address"],
        phone=row["phone"],
        created_date=str(row["created_date"]),
    )


def new_company_row(request: CompanyCreateDTO, *, company_id: str, now: str) -> dict[str, Any]:
    return {
        "id": company_id,
        "name": request.name,
        "address": request.address,
        "phone": request.phone,
        "created_date": now,
    }
