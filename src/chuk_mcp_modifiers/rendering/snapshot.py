"""
Registry snapshot - the read-only view handed to the presentation layer.

A snapshot is taken once per page load. It is never updated in place;
registry changes require a fresh snapshot.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_modifiers.registry.modifiers import ModifierRegistry


class RegistrySnapshot(BaseModel):
    """Frozen copy of the category map and the modifier-by-scope map."""

    schema_version: str = Field("snapshot/v1", alias="schema")
    categories: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Category slug to category fields",
    )
    modifiers: dict[str, dict[str, dict[str, Any]]] = Field(
        default_factory=dict,
        description="Scope to modifier name to modifier fields",
    )
    stylesheet: str = Field("", description="Aggregate inline stylesheet")

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def from_registry(cls, registry: ModifierRegistry) -> RegistrySnapshot:
        """Capture the current registry state."""
        return cls(
            categories={c.slug: c.to_dict() for c in registry.categories.list_categories()},
            modifiers=registry.to_dict(),
            stylesheet=registry.collect_inline_styles(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "categories": self.categories,
            "modifiers": self.modifiers,
            "stylesheet": self.stylesheet,
        }
