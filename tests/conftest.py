"""Shared pytest fixtures and test helpers for salesctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from salesctl.config.settings import SalesSettings
from salesctl.infrastructure.database.engine import init_database
from salesctl.infrastructure.store import Store


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host SALESCTL_* variables from leaking into settings."""
    import os

    for key in list(os.environ):
        if key.startswith("SALESCTL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / "sales.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store(tmp_path: Path) -> Generator[Store]:
    """Store on a fresh database under a temp project root."""
    settings = SalesSettings.from_cli(project_root=tmp_path)
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project root so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers (used across service test modules)
# ---------------------------------------------------------------------------


def add_company(store: Store, name: str, **kwargs: Any) -> dict[str, Any]:
    """Add a company via CompanyService, asserting success."""
    from salesctl.services.company import CompanyService

    result = CompanyService(store).add_company({"name": name, **kwargs})
    assert result.ok, result.error
    return result.data


def add_customer(store: Store, name: str, company_id: str, **kwargs: Any) -> dict[str, Any]:
    """Add a customer via CustomerService, asserting success."""
    from salesctl.services.customer import CustomerService

    result = CustomerService(store).add_customer(
        {"name": name, "company_id": company_id, **kwargs}
    )
    assert result.ok, result.error
    return result.data
