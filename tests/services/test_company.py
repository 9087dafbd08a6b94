"""Tests for CompanyService."""

from __future__ import annotations

import pytest

from salesctl.domain import messages
from salesctl.domain.types import ErrorCode
from salesctl.infrastructure.repositories.company import CompanyRepository
from salesctl.infrastructure.store import Store
from salesctl.services.company import CompanyService
from tests.conftest import add_company


class TestAddCompany:
    def test_add(self, store: Store) -> None:
        result = CompanyService(store).add_company({"name": "Contoso", "phone": "555"})
        assert result.ok
        assert result.message == messages.COMPANY_ADD_SUCCESS
        assert result.data["name"] == "Contoso"
        assert result.data["phone"] == "555"
        assert result.data["id"]

    def test_blank_name(self, store: Store) -> None:
        result = CompanyService(store).add_company({"name": ""})
        assert not result.ok
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.message == messages.COMPANY_INVALID_INPUT

    def test_unexpected_failure_is_wrapped(
        self, store: Store, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def boom(self: CompanyRepository, row: dict) -> None:
            msg = "readonly database"
            raise RuntimeError(msg)

        monkeypatch.setattr(CompanyRepository, "add", boom)
        result = CompanyService(store).add_company({"name": "Contoso"})
        assert result.error.code == ErrorCode.UNEXPECTED
        assert result.error.detail["cause"] == "readonly database"


class TestListCompanies:
    def test_empty(self, store: Store) -> None:
        result = CompanyService(store).list_companies()
        assert result.ok
        assert result.message == messages.COMPANY_LIST_EMPTY
        assert result.data == {"count": 0, "items": []}

    def test_sorted_by_name(self, store: Store) -> None:
        add_company(store, "Zeta")
        add_company(store, "Alpha")
        result = CompanyService(store).list_companies()
        assert result.data["count"] == 2
        assert [c["name"] for c in result.data["items"]] == ["Alpha", "Zeta"]
