# sffhub/errors.py
"""Typed failures raised by the store adapter and the lifecycle managers.

Routers turn these into HTTP responses; nothing below the routers knows about HTTP.
"""
from typing import Any, Optional


class HubError(Exception):
    """Base class for every failure the hub reports to a caller."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(HubError):
    """Required input missing or malformed; nothing was persisted."""

    status_code = 422


class NotFoundError(HubError):
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class StorageError(HubError):
    """The underlying persistence call failed."""

    status_code = 502


class AuthError(HubError):
    status_code = 401
