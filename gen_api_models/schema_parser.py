"""Classify references and map Swagger schemas to TypeScript types.

Handles:
- $ref classification (definitions / parameters / other)
- Primitive parameter types (integer -> number, file -> upload object)
- Definition schemas -> io-ts codec expressions:
  - $ref to other definitions (collected as imports)
  - allOf composition
  - string and literal enums
  - arrays, records and objects with required / optional properties
  - strict (exact) interfaces
"""

from __future__ import annotations

import enum
import json
from typing import Any, NamedTuple

# Structural type used for ``type: file`` form parameters
FILE_TYPE = "{ uri: string, name: string, type: string }"

_PRIMITIVE_CODECS: dict[str, str] = {
    "string": "t.string",
    "integer": "t.Integer",
    "number": "t.number",
    "boolean": "t.boolean",
}


class RefType(enum.Enum):
    DEFINITION = "definition"
    PARAMETER = "parameter"
    OTHER = "other"


class Reference(NamedTuple):
    ref_type: RefType
    name: str


def type_from_ref(ref: str) -> Reference | None:
    """Classify a local pointer such as ``#/definitions/Pet``.

    Returns None when the pointer does not have exactly three segments.
    """
    parts = ref.split("/")
    if len(parts) != 3:
        return None
    if parts[1] == "definitions":
        ref_type = RefType.DEFINITION
    elif parts[1] == "parameters":
        ref_type = RefType.PARAMETER
    else:
        ref_type = RefType.OTHER
    return Reference(ref_type, parts[2])


def spec_type_to_ts(spec_type: str) -> str:
    """Map a Swagger primitive type name to a TypeScript type."""
    if spec_type == "integer":
        return "number"
    if spec_type == "file":
        return FILE_TYPE
    return spec_type


def _literal(value: Any) -> str:
    return json.dumps(value, default=str)


def _enum_type(values: list[Any]) -> str:
    if values and all(isinstance(v, str) for v in values):
        keys = ", ".join(f"{_literal(v)}: null" for v in values)
        return f"t.keyof({{{keys}}})"
    literals = [f"t.literal({_literal(v)})" for v in values]
    if not literals:
        return "t.unknown"
    if len(literals) == 1:
        return literals[0]
    return f"t.union([{', '.join(literals)}])"


def _props(properties: dict[str, str]) -> str:
    return "{" + ", ".join(f"{_literal(k)}: {v}" for k, v in properties.items()) + "}"


def _object_type(schema: dict[str, Any], imports: set[str], strict: bool) -> str:
    properties = schema.get("properties") or {}
    if not properties:
        additional = schema.get("additionalProperties")
        if isinstance(additional, dict):
            return f"t.record(t.string, {resolve_schema_type(additional, imports, strict)})"
        return "t.UnknownRecord"

    required = set(schema.get("required") or [])
    mandatory: dict[str, str] = {}
    optional: dict[str, str] = {}
    for prop_name, prop_schema in properties.items():
        codec = resolve_schema_type(prop_schema, imports, strict)
        if prop_name in required:
            mandatory[prop_name] = codec
        else:
            optional[prop_name] = codec

    parts = []
    if mandatory:
        parts.append(f"t.interface({_props(mandatory)})")
    if optional:
        parts.append(f"t.partial({_props(optional)})")
    codec = parts[0] if len(parts) == 1 else f"t.intersection([{', '.join(parts)}])"
    return f"t.exact({codec})" if strict else codec


def resolve_schema_type(
    schema: dict[str, Any],
    imports: set[str],
    strict: bool = False,
) -> str:
    """Resolve a definition schema to an io-ts codec expression.

    Names of referenced definitions are added to ``imports``.
    """
    if not schema:
        return "t.unknown"

    ref = schema.get("$ref")
    if isinstance(ref, str):
        parsed = type_from_ref(ref)
        if parsed is not None and parsed.ref_type is RefType.DEFINITION:
            imports.add(parsed.name)
            return parsed.name
        return "t.unknown"

    if "allOf" in schema:
        members = [resolve_schema_type(sub, imports, strict) for sub in schema["allOf"]]
        if not members:
            return "t.unknown"
        if len(members) == 1:
            return members[0]
        return f"t.intersection([{', '.join(members)}])"

    if "enum" in schema:
        return _enum_type(list(schema["enum"]))

    schema_type = schema.get("type")
    if schema_type in _PRIMITIVE_CODECS:
        return _PRIMITIVE_CODECS[schema_type]
    if schema_type == "array":
        item_type = resolve_schema_type(schema.get("items") or {}, imports, strict)
        return f"t.readonlyArray({item_type})"
    if schema_type == "object" or "properties" in schema:
        return _object_type(schema, imports, strict)

    return "t.unknown"
