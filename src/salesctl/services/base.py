"""BaseService: abstract foundation for all salesctl services.

Every service receives a :class:`Store` at construction time. The Store
provides transactional access to the repositories. Services own their
transaction boundaries via ``self._store.transaction()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from salesctl.domain.types import ErrorCode
from salesctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from salesctl.infrastructure.store import Store

logger = structlog.get_logger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class CustomerService(BaseService):
            def get_customer(self, customer_id: str) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    @staticmethod
    def _failure(
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Build an error result with a stable *message*."""
        return ServiceResult(
            ok=False,
            op=op,
            message=message,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    @classmethod
    def _unexpected(cls, op: str, message: str, exc: Exception) -> ServiceResult:
        """Convert an unanticipated exception into an ``UNEXPECTED`` result.

        The message stays the operation's constant; the cause is kept in
        ``detail`` for diagnostics.
        """
        logger.error("service.unexpected_error", op=op, exc_info=exc)
        return cls._failure(
            op,
            ErrorCode.UNEXPECTED,
            message,
            cause=str(exc),
            exception=type(exc).__name__,
        )
