"""Errors raised while reading permission strings."""
from typing import Optional


class PermissionFormatError(ValueError):
    """Base class for permission strings that cannot be used."""

    def __init__(self, permission: str, message: Optional[str] = None):
        self.permission = permission
        super().__init__(message or f"Invalid permission format: {permission}")


class MalformedPermissionError(PermissionFormatError):
    """Permission string does not have the action:resource[:scope] shape."""


class UnknownPermissionValueError(PermissionFormatError):
    """A segment holds a value outside the known actions, resources or scopes."""

    def __init__(self, permission: str, segment: str, value: str):
        self.segment = segment
        self.value = value
        super().__init__(permission, f"Unknown {segment} '{value}' in permission: {permission}")
