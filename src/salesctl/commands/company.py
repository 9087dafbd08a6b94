"""Command group: company registration and listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from salesctl.commands._base import SalesGroup
from salesctl.services.company import CompanyService

if TYPE_CHECKING:
    from salesctl.commands._context import AppContext

_COMPANY_EXAMPLES = """\
  salesctl company add "Northwind Traders" --phone "+1 555 0100"
  salesctl company list
  salesctl --json company list"""


@click.group(cls=SalesGroup, examples=_COMPANY_EXAMPLES)
def company() -> None:
    """Register and list companies."""


@company.command(
    examples="""\
  salesctl company add "Northwind Traders"
  salesctl company add "Contoso" --address "1 Main St" --phone 5550101"""
)
@click.argument("name")
@click.option("--address", default=None, help="Postal address.")
@click.option("--phone", default=None, help="Phone number.")
@click.pass_obj
def add(app: AppContext, name: str, address: str | None, phone: str | None) -> None:
    """Add a company."""
    svc = CompanyService(app.store)
    app.emit(svc.add_company({"name": name, "address": address, "phone": phone}))


@company.command(
    name="list",
    examples="""\
  salesctl company list
  salesctl -q company list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List companies by name."""
    app.emit(CompanyService(app.store).list_companies())
