"""Build the template context from a bundled Swagger 2.0 spec.

Walks every path and operation, building one OperationDescriptor per
supported operation, and collects the definitions and the models the
request types file has to import.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from .config import Settings, get_settings
from .decoders import compose_response_decoders
from .document import Document, Operation
from .errors import InvalidSpecError, UnsupportedSpecVersionError
from .models import AuthHeader, GenerationContext, OperationDescriptor, ParameterEntry, find_success_response
from .parameters import collect_path_parameters, merge_parameters, resolve_operation_parameters
from .responses import map_responses
from .security import auth_parameters, get_auth_headers, requirement_names

logger = logging.getLogger(__name__)

SUPPORTED_SPEC_VERSION = "2.0"

SUPPORTED_METHODS = ("get", "post", "put", "delete")

# Methods whose requests carry a Content-Type header when they have parameters
_CONTENT_TYPE_METHODS = {"post", "put"}


def is_swagger2(spec: dict[str, Any]) -> bool:
    """Check the version marker of a raw spec."""
    return "swagger" in spec and str(spec["swagger"]) == SUPPORTED_SPEC_VERSION


def parse_document(spec: dict[str, Any]) -> Document:
    """Check the version and validate the raw spec into a Document."""
    if not is_swagger2(spec):
        raise UnsupportedSpecVersionError("The specification is not of type swagger 2")
    try:
        return Document.model_validate(spec)
    except ValidationError as exc:
        raise InvalidSpecError(f"The specification is not a valid swagger 2 document: {exc}") from exc


def _unique(values: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(values))


def build_operation(
    method: str,
    path: str,
    operation: Operation,
    document: Document,
    settings: Settings,
    path_parameters: Sequence[ParameterEntry] = (),
    global_auth_headers: Sequence[AuthHeader] = (),
) -> OperationDescriptor | None:
    """Build the descriptor of one operation, or None if it must be skipped."""
    method = method.lower()
    if method not in SUPPORTED_METHODS:
        logger.warning("Skipping unsupported method [%s] [%s]", method, path)
        return None

    operation_id = operation.operation_id
    if not operation_id:
        logger.warning("Skipping method with missing operationId [%s] [%s]", method, path)
        return None

    params, imported = resolve_operation_parameters(
        operation.parameters, document.parameters, operation_id
    )

    auth_headers: list[AuthHeader] = []
    if operation.security is not None:
        auth_headers = get_auth_headers(
            document.security_definitions, requirement_names(operation.security)
        )

    merged = merge_parameters(
        path_parameters,
        auth_parameters([*global_auth_headers, *auth_headers]),
        params,
    )

    content_type = ["Content-Type"] if method in _CONTENT_TYPE_METHODS and params else []
    headers = _unique([
        *content_type,
        *(h.header_name for h in auth_headers),
        *(h.header_name for h in global_auth_headers),
    ])

    responses, response_types = map_responses(
        operation.responses,
        operation_id,
        settings.default_success_type,
        settings.default_error_type,
    )

    decoders = None
    success = find_success_response(responses)
    if settings.generate_response_decoders and success is not None:
        decoders = compose_response_decoders(
            responses,
            success,
            settings.no_content_type,
            settings.generic_error_type,
        )

    return OperationDescriptor(
        operation_id=operation_id,
        method=method,
        path=path,
        parameters=merged,
        headers=headers,
        responses=responses,
        decoders=decoders,
        imported_types=frozenset(imported | response_types),
    )


def build_context(spec: dict[str, Any], settings: Settings | None = None) -> GenerationContext:
    """Build the full template context from the bundled spec."""
    settings = settings or get_settings()
    document = parse_document(spec)

    definitions = document.definitions or {}
    if not definitions:
        logger.info("No definitions found, skipping generation of model code.")

    operations: list[OperationDescriptor] = []
    imports: set[str] = set()

    if settings.generate_operations:
        # global auth headers apply only if global security is defined
        global_auth_headers: list[AuthHeader] = []
        if document.security is not None:
            global_auth_headers = get_auth_headers(
                document.security_definitions, requirement_names(document.security)
            )

        seen: set[str] = set()
        for path, path_item in document.paths.items():
            path_parameters = collect_path_parameters(path_item.parameters)
            for method, operation in path_item.operations.items():
                descriptor = build_operation(
                    method,
                    path,
                    operation,
                    document,
                    settings,
                    path_parameters=path_parameters,
                    global_auth_headers=global_auth_headers,
                )
                if descriptor is None:
                    continue
                if descriptor.operation_id in seen:
                    logger.warning(
                        "Skipping duplicate operationId [%s] [%s %s]",
                        descriptor.operation_id, method, path,
                    )
                    continue
                seen.add(descriptor.operation_id)
                operations.append(descriptor)
                imports = imports | descriptor.imported_types

    return GenerationContext(
        definitions=definitions,
        operations=operations,
        imports=sorted(imports),
        strict_interfaces=settings.strict_interfaces,
        generate_request_types=settings.generate_request_types,
        generate_response_decoders=settings.generate_response_decoders,
    )
