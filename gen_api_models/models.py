"""Descriptors produced by the context builder and consumed by the templates."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ParameterEntry(BaseModel):
    """One request parameter; optionality lives in ``required``, never in ``name``."""

    name: str
    required: bool
    type: str


class AuthHeader(BaseModel):
    scheme_name: str
    header_name: str
    required: bool = True


class ResponseEntry(BaseModel):
    status: str
    type: str


class ResponseDecoders(BaseModel):
    """Composed decoder for one operation.

    ``expression`` is the body of the generic decoder factory and refers to
    the overridable success codec as ``type``; ``default_type`` is the codec
    the default decoder passes to that factory.
    """

    expression: str
    default_type: str


class OperationDescriptor(BaseModel):
    operation_id: str
    method: str
    path: str
    parameters: list[ParameterEntry] = Field(default_factory=list)
    headers: list[str] = Field(default_factory=list)
    responses: list[ResponseEntry] = Field(default_factory=list)
    decoders: ResponseDecoders | None = None
    imported_types: frozenset[str] = frozenset()

    @property
    def success_response(self) -> ResponseEntry | None:
        return find_success_response(self.responses)


class GenerationContext(BaseModel):
    """Everything the templates need for one run."""

    definitions: dict[str, dict[str, Any]] = Field(default_factory=dict)
    operations: list[OperationDescriptor] = Field(default_factory=list)
    imports: list[str] = Field(default_factory=list)
    strict_interfaces: bool = False
    generate_request_types: bool = False
    generate_response_decoders: bool = False

    @property
    def generate_operations(self) -> bool:
        return self.generate_request_types or self.generate_response_decoders


def find_success_response(responses: list[ResponseEntry]) -> ResponseEntry | None:
    """Return the first declared ``2xx`` response, if any."""
    return next(
        (r for r in responses if len(r.status) == 3 and r.status.startswith("2")),
        None,
    )
