"""Classification enums shared across layers."""

from __future__ import annotations

from enum import StrEnum


class SortOrder(StrEnum):
    """Customer list orderings accepted by ``list_customers``.

    ``DATE`` lists the newest customers first and ``DATE_DESC`` the oldest
    first; the names follow the keys the sales UI has always sent.
    """

    DATE = "date"
    DATE_DESC = "datedesc"
    ALPHABETICAL = "alphabetical"
    ALPHABETICAL_DESC = "alphabeticaldesc"


class ErrorCode(StrEnum):
    """Codes carried by ``ServiceError.code``."""

    NOT_FOUND = "NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    UNEXPECTED = "UNEXPECTED"
