"""Bundled example documentation.

The examples double as starting points for new documents (``apidocgen
example users > api.json``) and as known-valid inputs for the generators.
Each call returns a fresh deep copy, so callers may mutate the result.
"""

from __future__ import annotations

import copy
from typing import Any

from apidocgen.exceptions import InvalidUsageError


_USER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "id": {"type": "number", "description": "User ID"},
        "name": {"type": "string", "description": "Display name"},
        "email": {"type": "string", "description": "Email address"},
        "avatar": {"type": "string", "description": "Avatar URL"},
        "createdAt": {"type": "string", "description": "Creation time"},
    },
    "required": ["id", "name", "email"],
}

_ID_PARAMETER: dict[str, Any] = {
    "name": "id",
    "in": "path",
    "required": True,
    "type": "number",
    "description": "User ID",
    "example": 1,
}

USER_MANAGEMENT_API: dict[str, Any] = {
    "title": "User Management API",
    "version": "1.0.0",
    "description": "User registration, lookup and profile management",
    "baseURL": "https://api.example.com",
    "authentication": {
        "type": "bearer",
        "tokenPrefix": "Bearer",
        "description": "JWT token sent as 'Authorization: Bearer <token>'",
    },
    "endpoints": [
        {
            "id": "get-users",
            "name": "user list",
            "method": "GET",
            "path": "/users",
            "summary": "List users page by page",
            "description": "Returns users, with paging and keyword search",
            "tags": ["users"],
            "parameters": [
                {
                    "name": "page",
                    "in": "query",
                    "type": "number",
                    "description": "Page number, starting at 1",
                    "example": 1,
                    "minimum": 1,
                },
                {
                    "name": "pageSize",
                    "in": "query",
                    "type": "number",
                    "description": "Items per page",
                    "example": 10,
                    "minimum": 1,
                    "maximum": 100,
                },
                {
                    "name": "search",
                    "in": "query",
                    "type": "string",
                    "description": "Search keyword",
                    "example": "john",
                },
            ],
            "responses": [
                {
                    "statusCode": 200,
                    "description": "A page of users",
                    "contentType": "application/json",
                    "schema": {
                        "type": "object",
                        "properties": {
                            "data": {"type": "array", "items": _USER_SCHEMA},
                            "total": {"type": "number", "description": "Total users"},
                            "page": {"type": "number", "description": "Current page"},
                            "pageSize": {"type": "number", "description": "Items per page"},
                        },
                        "required": ["data", "total"],
                    },
                },
            ],
        },
        {
            "id": "get-user",
            "name": "user detail",
            "method": "GET",
            "path": "/users/{id}",
            "summary": "Get one user",
            "tags": ["users"],
            "parameters": [_ID_PARAMETER],
            "responses": [
                {"statusCode": 200, "description": "The user", "schema": _USER_SCHEMA},
                {"statusCode": 404, "description": "User not found"},
            ],
        },
        {
            "id": "create-user",
            "name": "user",
            "method": "POST",
            "path": "/users",
            "summary": "Create a user",
            "description": "Creates a new user account",
            "tags": ["users"],
            "requestBody": {
                "contentType": "application/json",
                "schema": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string", "description": "Display name"},
                        "email": {"type": "string", "description": "Email address"},
                        "password": {"type": "string", "description": "Password"},
                    },
                    "required": ["name", "email", "password"],
                },
                "example": {
                    "name": "Jane Doe",
                    "email": "jane@example.com",
                    "password": "securePassword123",
                },
            },
            "responses": [
                {"statusCode": 201, "description": "User created", "schema": _USER_SCHEMA},
                {"statusCode": 400, "description": "Invalid request body"},
            ],
        },
        {
            "id": "update-user",
            "name": "user profile",
            "method": "PUT",
            "path": "/users/{id}",
            "summary": "Replace a user's profile",
            "tags": ["users"],
            "parameters": [_ID_PARAMETER],
            "requestBody": {
                "contentType": "application/json",
                "schema": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string", "description": "Display name"},
                        "email": {"type": "string", "description": "Email address"},
                        "avatar": {"type": "string", "description": "Avatar URL"},
                    },
                },
            },
            "responses": [
                {"statusCode": 200, "description": "User updated", "schema": _USER_SCHEMA},
            ],
        },
        {
            "id": "delete-user",
            "name": "user account",
            "method": "DELETE",
            "path": "/users/{id}",
            "summary": "Delete a user",
            "tags": ["users"],
            "parameters": [_ID_PARAMETER],
            "responses": [
                {"statusCode": 204, "description": "User deleted"},
            ],
        },
    ],
    "models": {
        "User": {
            "type": "object",
            "description": "A registered user",
            "properties": _USER_SCHEMA["properties"],
            "required": ["id", "name", "email"],
        },
    },
    "environments": [
        {"name": "development", "baseURL": "https://dev-api.example.com"},
        {"name": "production", "baseURL": "https://api.example.com"},
    ],
}

HEALTH_API: dict[str, Any] = {
    "title": "Health API",
    "version": "1.0.0",
    "baseURL": "https://api.example.com",
    "endpoints": [
        {
            "id": "health",
            "name": "health",
            "method": "GET",
            "path": "/health",
            "summary": "Service health check",
            "responses": [
                {
                    "statusCode": 200,
                    "description": "Service is healthy",
                    "schema": {
                        "type": "object",
                        "properties": {
                            "status": {"type": "string", "enum": ["ok", "degraded"]},
                            "uptime": {"type": "number"},
                        },
                        "required": ["status"],
                    },
                },
            ],
        },
    ],
}

_EXAMPLES: dict[str, dict[str, Any]] = {
    "users": USER_MANAGEMENT_API,
    "health": HEALTH_API,
}


def list_examples() -> list[str]:
    """Return the names of the bundled examples, sorted."""
    return sorted(_EXAMPLES)


def get_example(name: str) -> dict[str, Any]:
    """Return a deep copy of the example called *name*.

    Raises:
        InvalidUsageError: If no example has that name.
    """
    try:
        return copy.deepcopy(_EXAMPLES[name])
    except KeyError:
        raise InvalidUsageError(
            f"Unknown example '{name}'. Available: {', '.join(list_examples())}"
        ) from None
