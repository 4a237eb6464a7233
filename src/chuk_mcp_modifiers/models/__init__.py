"""
Pydantic models for the modifier system.

This module provides:
- Category: Named grouping with exclusive/non-exclusive selection semantics
- Modifier: CSS class plus optional inline style, scoped to block types
- coerce_bool: Boolean normalization for stored values
- coerce_text: Display-field normalization for stored values
"""

from chuk_mcp_modifiers.models.category import (
    Category,
    coerce_bool,
    coerce_text,
    is_valid_identifier,
)
from chuk_mcp_modifiers.models.modifier import Modifier

__all__ = [
    "Category",
    "Modifier",
    "coerce_bool",
    "coerce_text",
    "is_valid_identifier",
]
