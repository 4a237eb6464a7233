"""
Modifier model - one optional behavior unit applied to a block.

A modifier is a CSS class plus optional inline stylesheet text. It points
at its category by slug only; category metadata is resolved lazily.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_modifiers.models.category import is_valid_identifier


class Modifier(BaseModel):
    """A registered modifier record."""

    name: str = Field(..., description="Identifier, unique per scope")
    label: str = Field("", description="Display label")
    class_name: str = Field(..., alias="class", min_length=1, description="CSS class token")
    description: str = Field("", description="Display description")
    category: str = Field("", description="Category slug (empty for uncategorized)")
    inline_style: str = Field("", description="Stylesheet fragment for the class")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate modifier name format."""
        if not is_valid_identifier(v):
            raise ValueError(f"Invalid modifier name: {v!r}")
        return v

    @property
    def display_label(self) -> str:
        """Label, falling back to the name."""
        return self.label or self.name

    def to_dict(self) -> dict[str, Any]:
        """Convert to the external dictionary shape (uses the 'class' key)."""
        return {
            "name": self.name,
            "label": self.display_label,
            "class": self.class_name,
            "description": self.description,
            "category": self.category,
            "inline_style": self.inline_style,
        }
