"""Rich/JSON output dispatch.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). ``--quiet`` prints only the parsed value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from clientbook.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from clientbook.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode selection, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = True
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        no_color=not settings.color,
        width=settings.width,
    )
