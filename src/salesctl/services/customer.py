"""CustomerService: customer listing, lookup, and maintenance.

Every operation runs as one unit of work inside
``self._store.transaction()``: existence checks, the write, and the
commit either all happen or none do. Company records are only read here.

Outcomes map to error codes as follows:

- unknown customer id          -> ``NOT_FOUND``
- unknown company id on write  -> ``VALIDATION_FAILED``
- malformed request            -> ``VALIDATION_FAILED``
- anything else raised         -> ``UNEXPECTED`` (cause kept in detail)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from salesctl.domain import messages
from salesctl.domain.customers import (
    CustomerCreateDTO,
    CustomerUpdateDTO,
    new_customer_row,
    parse_sort_order,
    sort_customers,
    to_detail_dto,
    to_list_dto,
    update_values,
    with_company_name,
)
from salesctl.domain.types import ErrorCode
from salesctl.services._helpers import coerce_request, new_id, now_iso, validation_errors
from salesctl.services.base import BaseService
from salesctl.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class CustomerService(BaseService):
    """Handles the customer CRUD workflow."""

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_customers(self, sort_order: str | None = None) -> ServiceResult:
        """List every customer with its company name, optionally sorted.

        Unknown *sort_order* values keep the stored order. An empty store
        is a success with an empty list.
        """
        op = "list_customers"
        try:
            with self._store.transaction() as txn:
                customer_rows = txn.customers.get_all()
                company_rows = txn.companies.get_all()

            company_names = {row["id"]: row["name"] for row in company_rows}
            items = [
                with_company_name(to_list_dto(row), company_names.get(row["company_id"]))
                for row in customer_rows
            ]

            order = parse_sort_order(sort_order)
            if sort_order and order is None:
                logger.debug("customer.list.unknown_sort", sort_order=sort_order)
            items = sort_customers(items, order)
            dumped = [item.model_dump() for item in items]
        except Exception as exc:
            return self._unexpected(op, messages.CUSTOMER_LIST_FAILED, exc)

        return ServiceResult(
            ok=True,
            op=op,
            message=messages.CUSTOMER_LISTED_SUCCESS if dumped else messages.CUSTOMER_LIST_EMPTY,
            data={
                "count": len(dumped),
                "sort": order.value if order else None,
                "items": dumped,
            },
        )

    def get_customer(self, customer_id: str) -> ServiceResult:
        """Fetch one customer with its company name filled in."""
        op = "get_customer"
        try:
            with self._store.transaction() as txn:
                row = txn.customers.get_by_id(customer_id)
                if row is None:
                    return self._failure(
                        op,
                        ErrorCode.NOT_FOUND,
                        messages.CUSTOMER_NOT_FOUND,
                        id=customer_id,
                    )
                company = txn.companies.get_by_id(row["company_id"])
            dto = with_company_name(to_detail_dto(row), company["name"] if company else None)
        except Exception as exc:
            return self._unexpected(op, messages.CUSTOMER_GET_FAILED, exc)

        return ServiceResult(
            ok=True,
            op=op,
            message=messages.CUSTOMER_FOUND_SUCCESS,
            data=dto.model_dump(),
        )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def add_customer(self, request: CustomerCreateDTO | Mapping[str, Any]) -> ServiceResult:
        """Create a customer under an existing company."""
        op = "add_customer"
        try:
            req = coerce_request(CustomerCreateDTO, request)
        except ValidationError as exc:
            return self._failure(
                op,
                ErrorCode.VALIDATION_FAILED,
                messages.CUSTOMER_INVALID_INPUT,
                errors=validation_errors(exc),
            )

        try:
            with self._store.transaction() as txn:
                company = txn.companies.get_by_id(req.company_id)
                if company is None:
                    return self._failure(
                        op,
                        ErrorCode.VALIDATION_FAILED,
                        messages.CUSTOMER_ADD_INVALID_COMPANY,
                        company_id=req.company_id,
                    )
                row = new_customer_row(req, customer_id=new_id(), now=now_iso())
                txn.customers.add(row)
                dto = with_company_name(to_detail_dto(row), company["name"])
        except Exception as exc:
            return self._unexpected(op, messages.CUSTOMER_ADD_ERROR, exc)

        logger.info("customer.added", customer_id=row["id"], company_id=req.company_id)
        return ServiceResult(
            ok=True,
            op=op,
            message=messages.CUSTOMER_ADD_SUCCESS,
            data=dto.model_dump(),
        )

    def update_customer(self, request: CustomerUpdateDTO | Mapping[str, Any]) -> ServiceResult:
        """Overwrite a customer's fields from *request*.

        ``id`` and ``created_date`` are preserved; ``modified_date`` moves.
        """
        op = "update_customer"
        try:
            req = coerce_request(CustomerUpdateDTO, request)
        except ValidationError as exc:
            return self._failure(
                op,
                ErrorCode.VALIDATION_FAILED,
                messages.CUSTOMER_INVALID_INPUT,
                errors=validation_errors(exc),
            )

        try:
            with self._store.transaction() as txn:
                existing = txn.customers.get_by_id(req.id)
                if existing is None:
                    return self._failure(
                        op,
                        ErrorCode.NOT_FOUND,
                        messages.CUSTOMER_NOT_FOUND,
                        id=req.id,
                    )
                company = txn.companies.get_by_id(req.company_id)
                if company is None:
                    return self._failure(
                        op,
                        ErrorCode.VALIDATION_FAILED,
                        messages.CUSTOMER_UPDATE_INVALID_COMPANY,
                        company_id=req.company_id,
                    )
                values = update_values(req, now=now_iso())
                txn.customers.update(req.id, values)
                dto = with_company_name(to_detail_dto({**existing, **values}), company["name"])
        except Exception as exc:
            return self._unexpected(op, messages.CUSTOMER_UPDATED_FAILED, exc)

        logger.info("customer.updated", customer_id=req.id, company_id=req.company_id)
        return ServiceResult(
            ok=True,
            op=op,
            message=messages.CUSTOMER_UPDATED_SUCCESS,
            data=dto.model_dump(),
        )

    def delete_customer(self, customer_id: str) -> ServiceResult:
        """Remove a customer. The result carries status only."""
        op = "delete_customer"
        try:
            with self._store.transaction() as txn:
                if txn.customers.get_by_id(customer_id) is None:
                    return self._failure(
                        op,
                        ErrorCode.NOT_FOUND,
                        messages.CUSTOMER_NOT_FOUND,
                        id=customer_id,
                    )
                txn.customers.delete(customer_id)
        except Exception as exc:
            return self._unexpected(op, messages.CUSTOMER_DELETE_ERROR, exc)

        logger.info("customer.deleted", customer_id=customer_id)
        return ServiceResult(ok=True, op=op, message=messages.CUSTOMER_DELETE_SUCCESS)
