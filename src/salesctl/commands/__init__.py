"""Subcommand modules for salesctl.

Provides register_commands() which uses deferred imports to keep
``salesctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from salesctl.commands.company import company
    from salesctl.commands.customer import customer

    cli.add_command(company)
    cli.add_command(customer)
