"""
Management errors - structured rejections returned to administrative callers.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_modifiers.constants import ErrorCodes


class ManagementError(Exception):
    """A rejected administrative operation."""

    code = "error"
    status = 400

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        """Convert to the error payload shape."""
        payload: dict[str, Any] = {
            "status": "error",
            "code": self.code,
            "message": self.message,
            "http_status": self.status,
        }
        if self.field:
            payload["field"] = self.field
        return payload


class InvalidFieldError(ManagementError):
    """A required field is missing or malformed."""

    code = ErrorCodes.INVALID_PARAM
    status = 400


class ConflictError(ManagementError):
    """A custom entry with the same key already exists."""

    status = 400

    def __init__(self, message: str, code: str, field: str | None = None):
        super().__init__(message, field)
        self.code = code


class NotFoundError(ManagementError):
    """No custom entry has the requested key."""

    status = 404

    def __init__(self, message: str, code: str, field: str | None = None):
        super().__init__(message, field)
        self.code = code
