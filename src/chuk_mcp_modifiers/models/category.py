"""
Category model - named groupings of modifiers with a shared selection discipline.

An exclusive category behaves like a radio group (one active choice),
a non-exclusive one like a set of checkboxes.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_modifiers.constants import (
    TRUTHY_STRINGS,
    UNCATEGORIZED_LABEL,
    UNCATEGORIZED_SLUG,
)

_WHITESPACE = re.compile(r"\s")


def is_valid_identifier(value: Any) -> bool:
    """Check that a slug or name is a non-empty string without whitespace."""
    return isinstance(value, str) and bool(value) and not _WHITESPACE.search(value)


def coerce_bool(value: Any) -> bool:
    """
    Normalize a boolean arriving from any storage or transport representation.

    Native booleans pass through; numbers are true only when equal to 1;
    strings are true when they are one of "true", "1", "yes", "on"
    (case-insensitive). Everything else is false.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    return False


def coerce_text(value: Any, default: str = "") -> str:
    """
    Normalize a display field (label, description, inline style).

    Strings pass through; numbers (e.g. YAML `label: 2024`) are
    stringified; anything else yields the default.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


class Category(BaseModel):
    """A modifier category."""

    slug: str = Field(..., description="Unique identifier")
    label: str = Field("", description="Display label")
    description: str = Field("", description="Display description")
    exclusive: bool = Field(
        default=False,
        description="Whether at most one modifier of this category may be selected",
    )

    model_config = {"frozen": True}

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Validate slug format."""
        if not is_valid_identifier(v):
            raise ValueError(f"Invalid category slug: {v!r}")
        return v

    @field_validator("exclusive", mode="before")
    @classmethod
    def normalize_exclusive(cls, v: Any) -> bool:
        """Coerce heterogeneous boolean representations."""
        return coerce_bool(v)

    @property
    def display_label(self) -> str:
        """Label, falling back to the slug."""
        return self.label or self.slug

    @classmethod
    def uncategorized(cls) -> Category:
        """The synthesized category used when a reference cannot be resolved."""
        return cls(
            slug=UNCATEGORIZED_SLUG,
            label=UNCATEGORIZED_LABEL,
            description="",
            exclusive=False,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain, storage-friendly dictionary."""
        return {
            "slug": self.slug,
            "label": self.display_label,
            "description": self.description,
            "exclusive": self.exclusive,
        }
