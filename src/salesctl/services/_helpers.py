"""Shared service-layer helper functions."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

_M = TypeVar("_M", bound=BaseModel)


def now_iso() -> str:
    """Current UTC time as ISO 8601 with fixed microsecond precision.

    Fixed width keeps lexical order equal to chronological order.
    """
    return datetime.now(UTC).isoformat(timespec="microseconds")


def new_id() -> str:
    """Fresh random identifier for a new record."""
    return str(uuid.uuid4())


def coerce_request(model_cls: type[_M], request: _M | Mapping[str, Any]) -> _M:
    """Accept either a ready request model or a plain mapping of its fields.

    Raises:
        pydantic.ValidationError: if the mapping does not fit *model_cls*.
    """
    if isinstance(request, model_cls):
        return request
    return model_cls.model_validate(request)


def validation_errors(exc: ValidationError) -> list[str]:
    """Flatten pydantic errors into ``"field: message"`` strings."""
    return [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    ]
