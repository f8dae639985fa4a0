"""Shared fixtures: a small petstore spec exercising every descriptor feature."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from gen_api_models.config import Settings


PETSTORE_SPEC: dict[str, Any] = {
    "swagger": "2.0",
    "info": {"title": "Petstore", "version": "1.0.0"},
    "securityDefinitions": {
        "ApiKeyAuth": {"type": "apiKey", "in": "header", "name": "Ocp-Apim-Subscription-Key"},
        "QueryKey": {"type": "apiKey", "in": "query", "name": "code"},
    },
    "parameters": {
        "PetId": {"name": "petId", "in": "path", "type": "string", "required": True},
        "Limit": {"name": "limit", "in": "query", "type": "integer"},
    },
    "definitions": {
        "Pet": {
            "type": "object",
            "description": "A pet in the store",
            "properties": {
                "id": {"type": "string"},
                "name": {"type": "string"},
                "tag": {"type": "string"},
            },
            "required": ["id", "name"],
        },
        "NewPet": {
            "type": "object",
            "properties": {"name": {"type": "string"}},
            "required": ["name"],
        },
        "Profile": {
            "type": "object",
            "properties": {
                "email": {"type": "string"},
                "pets": {"type": "array", "items": {"$ref": "#/definitions/Pet"}},
            },
        },
        "ProblemJson": {
            "type": "object",
            "properties": {"status": {"type": "integer"}, "title": {"type": "string"}},
        },
    },
    "paths": {
        "/profile": {
            "get": {
                "operationId": "getProfile",
                "responses": {
                    "200": {"description": "Found", "schema": {"$ref": "#/definitions/Profile"}},
                    "404": {"description": "Not found"},
                },
            },
        },
        "/pets": {
            "get": {
                "operationId": "listPets",
                "parameters": [{"$ref": "#/parameters/Limit"}],
                "responses": {
                    "200": {
                        "description": "Pets",
                        "schema": {"type": "array", "items": {"$ref": "#/definitions/Pet"}},
                    },
                },
            },
            "post": {
                "operationId": "createPet",
                "security": [{"ApiKeyAuth": []}],
                "parameters": [
                    {
                        "name": "body",
                        "in": "body",
                        "required": True,
                        "schema": {"$ref": "#/definitions/NewPet"},
                    },
                ],
                "responses": {
                    "201": {"description": "Created", "schema": {"$ref": "#/definitions/Pet"}},
                    "400": {"description": "Bad request"},
                    "500": {"description": "Error", "schema": {"$ref": "#/definitions/ProblemJson"}},
                },
            },
        },
        "/pets/{petId}": {
            "parameters": [{"name": "petId", "in": "path", "type": "string", "required": True}],
            "get": {
                "operationId": "getPet",
                "responses": {
                    "200": {"description": "Found", "schema": {"$ref": "#/definitions/Pet"}},
                    "404": {"description": "Not found"},
                },
            },
            "head": {
                "operationId": "headPet",
                "responses": {"200": {"description": "Exists"}},
            },
            "delete": {
                "operationId": "deletePet",
                "security": [{"ApiKeyAuth": []}],
                "responses": {
                    "204": {"description": "Deleted"},
                    "404": {"description": "Not found"},
                },
            },
        },
    },
}


@pytest.fixture
def petstore_spec() -> dict[str, Any]:
    return copy.deepcopy(PETSTORE_SPEC)


@pytest.fixture
def settings() -> Settings:
    """Settings with request types and decoders enabled."""
    return Settings(generate_request_types=True, generate_response_decoders=True)
