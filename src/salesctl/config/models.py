"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, salesctl.toml only contains
overrides. A fresh project needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from salesctl.domain.types import SortOrder


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    path: str = ".salesctl/sales.db"
    echo: bool = False


class CustomersConfig(BaseModel):
    """[customers] section."""

    model_config = {"frozen": True}

    default_sort: SortOrder | None = None

    @field_validator("default_sort", mode="before")
    @classmethod
    def _normalize_sort(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower() or None
        return value
