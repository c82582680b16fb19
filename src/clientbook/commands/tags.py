"""Command: parse a set of tags."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clientbook.commands._base import BookCommand

if TYPE_CHECKING:
    from clientbook.commands._context import AppContext


@click.command(
    cls=BookCommand,
    examples="""\
  clientbook tags friend vip
  clientbook --json tags friend vip friend""",
)
@click.argument("raw_tags", nargs=-1)
@click.pass_obj
def tags(app: AppContext, raw_tags: tuple[str, ...]) -> None:
    """Validate RAW_TAGS as a tag set; duplicates collapse."""
    from clientbook.services.validate import ValidateService

    app.emit(ValidateService().parse_tags(raw_tags))
