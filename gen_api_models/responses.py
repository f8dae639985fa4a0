"""Map declared responses to the TypeScript type of their payload."""

from __future__ import annotations

import logging

from .document import Response
from .models import ResponseEntry
from .schema_parser import RefType, type_from_ref

logger = logging.getLogger(__name__)


def map_responses(
    responses: dict[str, Response],
    operation_id: str,
    success_type: str,
    error_type: str,
) -> tuple[list[ResponseEntry], set[str]]:
    """Resolve every declared status, in declaration order.

    A response whose schema points at a definition is typed as that model.
    Other responses get ``success_type`` for status 200 and ``error_type``
    for everything else.
    """
    entries: list[ResponseEntry] = []
    imported: set[str] = set()

    for status, response in responses.items():
        type_name = None
        ref = response.reference
        if ref is not None:
            parsed = type_from_ref(ref)
            if parsed is not None and parsed.ref_type is RefType.DEFINITION:
                type_name = parsed.name
                imported.add(parsed.name)
            else:
                logger.warning(
                    "Ignoring response ref [%s] in operation [%s] [%s]", ref, operation_id, status
                )
        if type_name is None:
            # only 200 gets the success default; an untyped 201 or 204 is
            # typed as the error default and decoded as such
            type_name = success_type if status == "200" else error_type
        entries.append(ResponseEntry(status=status, type=type_name))

    return entries, imported
