"""Subcommand modules for clientbook.

Provides register_commands() which uses deferred imports to keep
``clientbook --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from clientbook.commands.fields import fields
    from clientbook.commands.parse import parse
    from clientbook.commands.tags import tags

    cli.add_command(parse)
    cli.add_command(tags)
    cli.add_command(fields)
