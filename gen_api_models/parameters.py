"""Collect the request parameters of an operation.

Three layers are merged, later layers overriding same-named entries:
  1. path-level parameters (plus global auth parameters)
  2. auth parameters from the operation's own security requirements
  3. the operation's parameters

Operation parameters are either inline (``name`` + ``type``) or carry a
pointer, directly or in ``schema``. Pointers to definitions become
parameters typed as the model; pointers to shared parameters are looked
up in the document's ``parameters`` section. Anything else is skipped
with a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .document import Parameter
from .models import ParameterEntry
from .naming import uncapitalize
from .schema_parser import RefType, spec_type_to_ts, type_from_ref

logger = logging.getLogger(__name__)


def resolve_parameter(
    param: Parameter,
    shared_parameters: dict[str, Parameter] | None,
    operation_id: str,
) -> tuple[ParameterEntry | None, str | None]:
    """Resolve one operation parameter.

    Returns the entry (None when skipped) and the name of the model it
    references, if any.
    """
    if param.name and param.type:
        entry = ParameterEntry(
            name=param.name,
            required=param.required,
            type=spec_type_to_ts(param.type),
        )
        return entry, None

    ref = param.reference
    if ref is None:
        logger.warning(
            "Skipping param without ref in operation [%s] [%s]", operation_id, param.name
        )
        return None, None

    parsed = type_from_ref(ref)
    if parsed is None:
        logger.warning("Cannot extract type from ref [%s] in operation [%s]", ref, operation_id)
        return None, None
    if parsed.ref_type is RefType.OTHER:
        logger.warning("Unrecognized ref type [%s] in operation [%s]", ref, operation_id)
        return None, None

    name = uncapitalize(parsed.name)

    if parsed.ref_type is RefType.DEFINITION:
        entry = ParameterEntry(name=name, required=param.required, type=parsed.name)
        return entry, parsed.name

    shared = shared_parameters.get(parsed.name) if shared_parameters is not None else None
    required = shared.required if shared is not None else False
    if shared is None or not shared.type:
        logger.warning(
            "Cannot resolve parameter [%s] in operation [%s]", parsed.name, operation_id
        )
        return None, None
    return ParameterEntry(name=name, required=required, type=spec_type_to_ts(shared.type)), None


def resolve_operation_parameters(
    parameters: list[Parameter],
    shared_parameters: dict[str, Parameter] | None,
    operation_id: str,
) -> tuple[list[ParameterEntry], set[str]]:
    """Resolve an operation's own parameters and the models they import."""
    entries: list[ParameterEntry] = []
    imported: set[str] = set()
    for param in parameters:
        entry, model = resolve_parameter(param, shared_parameters, operation_id)
        if entry is None:
            continue
        entries.append(entry)
        if model is not None:
            imported.add(model)
    return entries, imported


def collect_path_parameters(parameters: list[Parameter]) -> list[ParameterEntry]:
    """Path-level parameters shared by every operation under a path.

    Only inline typed parameters are carried over.
    """
    entries = []
    for param in parameters:
        if not (param.name and param.type):
            logger.debug("Ignoring untyped path-level parameter [%s]", param.name or param.ref)
            continue
        entries.append(
            ParameterEntry(name=param.name, required=param.required, type=spec_type_to_ts(param.type))
        )
    return entries


def merge_parameters(*layers: Iterable[ParameterEntry]) -> list[ParameterEntry]:
    """Merge parameter layers by name; later layers win."""
    merged: dict[str, ParameterEntry] = {}
    for layer in layers:
        for entry in layer:
            merged[entry.name] = entry
    return list(merged.values())
