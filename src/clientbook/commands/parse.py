"""Command: parse one raw value as a named field."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clientbook.commands._base import BookCommand

if TYPE_CHECKING:
    from clientbook.commands._context import AppContext


@click.command(
    cls=BookCommand,
    examples="""\
  clientbook parse price 12.50
  clientbook parse date 07/01/2024
  clientbook parse index " 3 "
  clientbook --json parse email alice@example.com
  clientbook -q parse quantity 10
  clientbook parse price -- -5""",
)
@click.argument("field")
@click.argument("raw")
@click.pass_obj
def parse(app: AppContext, field: str, raw: str) -> None:
    """Validate RAW as FIELD and show its canonical and display forms."""
    from clientbook.services.validate import ValidateService

    app.emit(ValidateService().parse_field(field.lower(), raw))
