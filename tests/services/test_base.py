"""Tests for BaseService and service inheritance."""

from __future__ import annotations

import pytest

from salesctl.domain.types import ErrorCode
from salesctl.infrastructure.store import Store
from salesctl.services.base import BaseService
from salesctl.services.company import CompanyService
from salesctl.services.customer import CustomerService

ALL_SERVICES = [CustomerService, CompanyService]


class TestBaseService:
    def test_store_stored(self, store: Store) -> None:
        assert BaseService(store)._store is store

    def test_failure_helper(self) -> None:
        result = BaseService._failure("op", ErrorCode.NOT_FOUND, "gone", id="x")
        assert result.ok is False
        assert result.message == "gone"
        assert result.error.code == ErrorCode.NOT_FOUND
        assert result.error.detail == {"id": "x"}

    def test_unexpected_keeps_message_stable(self) -> None:
        result = BaseService._unexpected("op", "Static message.", ValueError("bad value"))
        assert result.message == "Static message."
        assert result.error.code == ErrorCode.UNEXPECTED
        assert result.error.detail == {"cause": "bad value", "exception": "ValueError"}


class TestServiceInheritance:
    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_inherits_base_service(self, service_cls: type) -> None:
        assert issubclass(service_cls, BaseService)

    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_store_injection(self, service_cls: type, store: Store) -> None:
        assert service_cls(store)._store is store
