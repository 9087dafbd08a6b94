"""Command group: customer listing, lookup, and maintenance."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from salesctl.commands._base import SalesGroup
from salesctl.domain.types import SortOrder
from salesctl.services.customer import CustomerService

if TYPE_CHECKING:
    from salesctl.commands._context import AppContext

_CUSTOMER_EXAMPLES = """\
  salesctl customer list --sort alphabetical
  salesctl customer get 3f2a...
  salesctl customer add "Acme" --company <company-id> --phone 5550100
  salesctl customer update <id> --name "Acme Ltd" --company <company-id>
  salesctl customer delete <id>"""


@click.group(cls=SalesGroup, examples=_CUSTOMER_EXAMPLES)
def customer() -> None:
    """List, inspect, add, update, and delete customers."""


@customer.command(
    name="list",
    examples="""\
  salesctl customer list
  salesctl customer list --sort date
  salesctl customer list --sort alphabeticaldesc
  salesctl --json customer list""",
)
@click.option(
    "--sort",
    "sort_order",
    type=click.Choice([s.value for s in SortOrder], case_sensitive=False),
    default=None,
    help="Ordering (defaults to [customers] default_sort).",
)
@click.pass_obj
def list_cmd(app: AppContext, sort_order: str | None) -> None:
    """List customers with their company names."""
    if sort_order is None and app.settings.customers.default_sort is not None:
        sort_order = app.settings.customers.default_sort.value
    app.emit(CustomerService(app.store).list_customers(sort_order))


@customer.command(
    examples="""\
  salesctl customer get <id>
  salesctl --json customer get <id>"""
)
@click.argument("customer_id")
@click.pass_obj
def get(app: AppContext, customer_id: str) -> None:
    """Show one customer."""
    app.emit(CustomerService(app.store).get_customer(customer_id))


@customer.command(
    examples="""\
  salesctl customer add "Acme" --company <company-id>
  salesctl customer add "Acme" --company <company-id> --email sales@acme.test"""
)
@click.argument("name")
@click.option("--company", "company_id", required=True, help="Owning company id.")
@click.option("--address", default=None, help="Postal address.")
@click.option("--phone", default=None, help="Phone number.")
@click.option("--email", default=None, help="Contact email.")
@click.pass_obj
def add(
    app: AppContext,
    name: str,
    company_id: str,
    address: str | None,
    phone: str | None,
    email: str | None,
) -> None:
    """Add a customer to an existing company."""
    svc = CustomerService(app.store)
    result = svc.add_customer(
        {
            "name": name,
            "company_id": company_id,
            "address": address,
            "phone": phone,
            "email": email,
        }
    )
    app.emit(result)


@customer.command(
    examples="""\
  salesctl customer update <id> --name "Acme Ltd" --company <company-id>"""
)
@click.argument("customer_id")
@click.option("--name", required=True, help="Customer name.")
@click.option("--company", "company_id", required=True, help="Owning company id.")
@click.option("--address", default=None, help="Postal address.")
@click.option("--phone", default=None, help="Phone number.")
@click.option("--email", default=None, help="Contact email.")
@click.pass_obj
def update(
    app: AppContext,
    customer_id: str,
    name: str,
    company_id: str,
    address: str | None,
    phone: str | None,
    email: str | None,
) -> None:
    """Overwrite a customer's fields. Omitted optional fields are cleared."""
    svc = CustomerService(app.store)
    result = svc.update_customer(
        {
            "id": customer_id,
            "name": name,
            "company_id": company_id,
            "address": address,
            "phone": phone,
            "email": email,
        }
    )
    app.emit(result)


@customer.command(
    examples="""\
  salesctl customer delete <id>"""
)
@click.argument("customer_id")
@click.pass_obj
def delete(app: AppContext, customer_id: str) -> None:
    """Delete a customer."""
    app.emit(CustomerService(app.store).delete_customer(customer_id))
