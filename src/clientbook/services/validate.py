"""ValidateService — runs field parsers on behalf of the CLI."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from clientbook.services.parse import FIELD_PARSERS, ParseError, parse_tags
from clientbook.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _describe(value: Any) -> dict[str, Any]:
    return {"canonical": value.canonical, "display": str(value)}


class ValidateService:
    """Wrap parser outcomes in :class:`ServiceResult`.

    User parse failures become ``ok=False`` results. Programming errors
    (``TypeError``, ``ValueError`` from a value constructor) propagate.
    """

    def parse_field(self, field: str, raw: str) -> ServiceResult:
        op = f"parse_{field}"
        parser = FIELD_PARSERS.get(field)
        if parser is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="UNKNOWN_FIELD",
                    message=f"Unknown field: {field}",
                    detail={"fields": sorted(FIELD_PARSERS)},
                ),
            )

        try:
            value = parser(raw)
        except ParseError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=f"INVALID_{field.upper()}",
                    message=exc.message,
                    detail={"field": field, "input": raw},
                ),
            )

        logger.debug("Parsed %s input %r", field, raw)
        return ServiceResult(ok=True, op=op, data={"field": field, **_describe(value)})

    def parse_tags(self, raw_tags: Sequence[str]) -> ServiceResult:
        try:
            tags = parse_tags(raw_tags)
        except ParseError as exc:
            return ServiceResult(
                ok=False,
                op="parse_tags",
                error=ServiceError(
                    code="INVALID_TAG",
                    message=exc.message,
                    detail={"field": "tag"},
                ),
            )

        names = sorted(tag.canonical for tag in tags)
        warnings: list[str] = []
        if len(names) < len(raw_tags):
            warnings.append(f"{len(raw_tags) - len(names)} duplicate tag(s) ignored")
        return ServiceResult(
            ok=True,
            op="parse_tags",
            data={"tags": names, "count": len(names)},
            warnings=warnings,
        )

    def list_fields(self) -> ServiceResult:
        fields = sorted([*FIELD_PARSERS, "tags"])
        return ServiceResult(ok=True, op="list_fields", data={"fields": fields})
