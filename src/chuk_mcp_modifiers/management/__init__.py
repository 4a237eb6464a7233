"""
Management - the administrative surface for custom definitions.

This module provides:
- DefinitionManager: CRUD for custom categories, modifiers and settings
- ManagementError and subclasses: structured rejections
"""

from chuk_mcp_modifiers.management.errors import (
    ConflictError,
    InvalidFieldError,
    ManagementError,
    NotFoundError,
)
from chuk_mcp_modifiers.management.manager import DefinitionManager

__all__ = [
    "ConflictError",
    "DefinitionManager",
    "InvalidFieldError",
    "ManagementError",
    "NotFoundError",
]
