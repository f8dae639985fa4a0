"""Typed view of a bundled Swagger 2.0 document.

Only the shapes the descriptor builder reads are modelled. Unknown keys are
ignored; definitions are kept as raw schema dicts because they are handed
to the model templates untouched.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Every operation key a Swagger 2.0 path item may declare
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


class _SpecModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def _is_extension(key: Any) -> bool:
    """Vendor extension keys (``x-...``) allowed in Paths and Responses."""
    return isinstance(key, str) and key.startswith("x-")


def _schema_ref(schema: dict[str, Any] | None) -> str | None:
    if not schema:
        return None
    ref = schema.get("$ref")
    return ref if isinstance(ref, str) else None


class Parameter(_SpecModel):
    """An operation, path-level or shared parameter."""

    name: str | None = None
    location: str | None = Field(default=None, alias="in")
    required: bool = False
    type: str | None = None
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")
    ref: str | None = Field(default=None, alias="$ref")

    @property
    def reference(self) -> str | None:
        """The pointer carried directly or nested in ``schema``."""
        if self.ref is not None:
            return self.ref
        return _schema_ref(self.schema_)


class Response(_SpecModel):
    description: str = ""
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")

    @property
    def reference(self) -> str | None:
        return _schema_ref(self.schema_)


class SecurityScheme(_SpecModel):
    type: str | None = None
    location: str | None = Field(default=None, alias="in")
    name: str | None = None


class Operation(_SpecModel):
    operation_id: str | None = Field(default=None, alias="operationId")
    summary: str = ""
    description: str = ""
    parameters: list[Parameter] = Field(default_factory=list)
    responses: dict[str, Response] = Field(default_factory=dict)
    security: list[dict[str, list[str]]] | None = None

    @field_validator("parameters", mode="before")
    @classmethod
    def _default_parameters(cls, value: Any) -> Any:
        return value or []

    @field_validator("responses", mode="before")
    @classmethod
    def _stringify_statuses(cls, value: Any) -> Any:
        # YAML loads unquoted status codes as integers
        if isinstance(value, dict):
            return {
                str(status): response or {}
                for status, response in value.items()
                if not _is_extension(status)
            }
        return value or {}


class PathItem(_SpecModel):
    """Path-level parameters plus the operations in declaration order."""

    parameters: list[Parameter] = Field(default_factory=list)
    operations: dict[str, Operation] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _split_operations(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "operations" in data:
            return data
        operations = {
            key.lower(): value
            for key, value in data.items()
            if isinstance(key, str) and key.lower() in HTTP_METHODS
        }
        return {"parameters": data.get("parameters") or [], "operations": operations}


class Document(_SpecModel):
    swagger: str
    info: dict[str, Any] = Field(default_factory=dict)
    paths: dict[str, PathItem] = Field(default_factory=dict)
    definitions: dict[str, dict[str, Any]] | None = None
    parameters: dict[str, Parameter] | None = None
    security_definitions: dict[str, SecurityScheme] | None = Field(
        default=None, alias="securityDefinitions"
    )
    security: list[dict[str, list[str]]] | None = None

    @field_validator("swagger", mode="before")
    @classmethod
    def _stringify_version(cls, value: Any) -> Any:
        # ``swagger: 2.0`` without quotes is a float in YAML
        return str(value) if isinstance(value, (int, float)) else value

    @field_validator("paths", mode="before")
    @classmethod
    def _default_paths(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {path: item for path, item in value.items() if not _is_extension(path)}
        return value or {}
