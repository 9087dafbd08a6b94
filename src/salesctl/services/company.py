"""CompanyService: the companies customers belong to."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from salesctl.domain import messages
from salesctl.domain.companies import CompanyCreateDTO, new_company_row, to_company_dto
from salesctl.domain.types import ErrorCode
from salesctl.services._helpers import coerce_request, new_id, now_iso, validation_errors
from salesctl.services.base import BaseService
from salesctl.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class CompanyService(BaseService):
    """Lists and registers companies."""

    def list_companies(self) -> ServiceResult:
        """All companies ordered by name."""
        op = "list_companies"
        try:
            with self._store.transaction() as txn:
                rows = txn.companies.get_all()
        except Exception as exc:
            return self._unexpected(op, messages.COMPANY_LIST_FAILED, exc)

        items = [to_company_dto(row).model_dump() for row in rows]
        return ServiceResult(
            ok=True,
            op=op,
            message=messages.COMPANY_LISTED_SUCCESS if items else messages.COMPANY_LIST_EMPTY,
            data={"count": len(items), "items": items},
        )

    def add_company(self, request: CompanyCreateDTO | Mapping[str, Any]) -> ServiceResult:
        op = "add_company"
        try:
            req = coerce_request(CompanyCreateDTO, request)
        except ValidationError as exc:
            return self._failure(
                op,
                ErrorCode.VALIDATION_FAILED,
                messages.COMPANY_INVALID_INPUT,
                errors=validation_errors(exc),
            )

        row = new_company_row(req, company_id=new_id(), now=now_iso())
        try:
            with self._store.transaction() as txn:
                txn.companies.add(row)
        except Exception as exc:
            return self._unexpected(op, messages.COMPANY_ADD_ERROR, exc)

        logger.info("company.added", company_id=row["id"])
        return ServiceResult(
            ok=True,
            op=op,
            message=messages.COMPANY_ADD_SUCCESS,
            data=to_company_dto(row).model_dump(),
        )
