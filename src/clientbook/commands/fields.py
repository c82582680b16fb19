"""Command: list the field names accepted by ``parse``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clientbook.commands._base import BookCommand

if TYPE_CHECKING:
    from clientbook.commands._context import AppContext


@click.command(cls=BookCommand)
@click.pass_obj
def fields(app: AppContext) -> None:
    """List the field names that can be parsed."""
    from clientbook.services.validate import ValidateService

    app.emit(ValidateService().list_fields())
