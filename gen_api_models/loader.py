"""Load a Swagger 2.0 spec and bundle it into a single document.

Reads JSON or YAML from a local path or an http(s) URL, then pulls every
external-file $ref into the root document so that only local pointers
(``#/definitions/...``, ``#/parameters/...``) remain.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urljoin, urlparse

import httpx
import yaml

from .errors import SpecLoadError

logger = logging.getLogger(__name__)

FETCH_TIMEOUT_SECONDS = 30

# Sections whose entries are copied into the root document instead of inlined
_BUNDLED_SECTIONS = ("definitions", "parameters")


def _is_url(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def _join(base: str, location: str) -> str:
    if _is_url(base):
        return urljoin(base, location)
    return str(Path(base).parent / location)


def _read_text(source: str) -> str:
    if _is_url(source):
        try:
            response = httpx.get(source, timeout=FETCH_TIMEOUT_SECONDS, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise SpecLoadError(f"Cannot fetch spec from {source}: {exc}") from exc
        return response.text
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecLoadError(f"Cannot read spec file {source}: {exc}") from exc


def read_document(source: str | Path) -> dict[str, Any]:
    """Read and parse a single JSON or YAML document."""
    source = str(source)
    text = _read_text(source)
    try:
        if urlparse(source).path.endswith(".json"):
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SpecLoadError(f"Cannot parse spec {source}: {exc}") from exc
    if not isinstance(data, dict):
        raise SpecLoadError(f"Spec {source} is not a mapping")
    return data


def resolve_ref(spec: dict[str, Any], ref: str) -> Any:
    """Resolve a local JSON pointer (``#/a/b``) in the spec."""
    pointer = ref.split("#", 1)[-1]
    node: Any = spec
    for part in pointer.strip("/").split("/"):
        if not part:
            continue
        part = part.replace("~1", "/").replace("~0", "~")
        if isinstance(node, list):
            node = node[int(part)]
        else:
            node = node[part]
    return node


def bundle_spec(spec: dict[str, Any], base: str | Path) -> dict[str, Any]:
    """Return a copy of ``spec`` with every external-file $ref bundled in.

    ``base`` is the location ``spec`` was read from; relative file refs are
    resolved against it.
    """
    root = copy.deepcopy(spec)
    documents: dict[str, dict[str, Any]] = {}
    imported: dict[str, dict[str, Any]] = {section: {} for section in _BUNDLED_SECTIONS}

    def load(location: str) -> dict[str, Any]:
        if location not in documents:
            logger.debug("Bundling external document %s", location)
            documents[location] = read_document(location)
        return documents[location]

    def resolve(ref: str, node: dict[str, Any], base: str, doc: dict[str, Any]) -> Any:
        location, _, pointer = ref.partition("#")
        if location:
            target_base = _join(base, location)
            target_doc = load(target_base)
        elif doc is root:
            return node
        else:
            target_base, target_doc = base, doc

        try:
            target = resolve_ref(target_doc, pointer)
        except (KeyError, IndexError, ValueError, TypeError) as exc:
            raise SpecLoadError(f"Cannot resolve $ref {ref} from {base}") from exc

        parts = pointer.strip("/").split("/")
        if len(parts) == 2 and parts[0] in _BUNDLED_SECTIONS:
            section, name = parts
            if name not in imported[section] and name not in (root.get(section) or {}):
                # placeholder first so recursive refs terminate
                imported[section][name] = {}
                imported[section][name] = walk(target, target_base, target_doc)
            return {"$ref": f"#/{section}/{name}"}
        return walk(target, target_base, target_doc)

    def walk(node: Any, base: str, doc: dict[str, Any]) -> Any:
        if isinstance(node, dict):
            ref = node.get("$ref")
            if isinstance(ref, str):
                return resolve(ref, node, base, doc)
            return {key: walk(value, base, doc) for key, value in node.items()}
        if isinstance(node, list):
            return [walk(item, base, doc) for item in node]
        return node

    bundled = walk(root, str(base), root)
    for section, entries in imported.items():
        if entries:
            bundled[section] = {**(bundled.get(section) or {}), **entries}
    return bundled


def load_spec(source: str | Path) -> dict[str, Any]:
    """Load a spec from disk or URL and bundle its external references."""
    spec = read_document(source)
    return bundle_spec(spec, str(source))
