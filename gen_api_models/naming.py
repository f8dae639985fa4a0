"""Identifier and literal helpers for generated TypeScript.

Used by the parameter collector (parameter names derived from refs) and
registered as Jinja2 filters by codegen.

Examples:
  capitalize("getProfile")              -> "GetProfile"
  uncapitalize("PetId")                 -> "petId"
  property_key("petId")                 -> "petId"
  property_key("Ocp-Apim-Subscription-Key") -> '"Ocp-Apim-Subscription-Key"'
  union(["Content-Type", "X-Key"])      -> '"Content-Type"|"X-Key"'
  union([])                             -> "never"
"""

from __future__ import annotations

import json
import re

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def capitalize(name: str) -> str:
    """Upper-case the first character and keep the rest as is."""
    return name[:1].upper() + name[1:]


def uncapitalize(name: str) -> str:
    """Lower-case the first character and keep the rest as is."""
    return name[:1].lower() + name[1:]


def quote(value: str) -> str:
    return json.dumps(value)


def property_key(name: str) -> str:
    """Return ``name`` usable as an object type key, quoting it if needed."""
    return name if _IDENTIFIER.match(name) else quote(name)


def union(values: list[str]) -> str:
    """Render a union of string literal types, or ``never`` when empty."""
    if not values:
        return "never"
    return "|".join(quote(v) for v in values)


def comment(text: str) -> str:
    """Wrap text in a JSDoc block."""
    return "/**\n * " + "\n * ".join(text.split("\n")) + "\n */"
