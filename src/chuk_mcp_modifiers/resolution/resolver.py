"""
Modifier resolver - computes the modifiers visible to a block.

The resolver merges wildcard and block-type scopes, resolves each
modifier's category reference and groups the result by category.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from chuk_mcp_modifiers.models.category import Category
from chuk_mcp_modifiers.models.modifier import Modifier
from chuk_mcp_modifiers.registry.modifiers import ModifierRegistry, Scope


@dataclass
class CategoryGroup:
    """Modifiers of one category, with the category's metadata."""

    meta: Category
    modifiers: list[Modifier] = field(default_factory=list)

    @property
    def slug(self) -> str:
        return self.meta.slug

    @property
    def exclusive(self) -> bool:
        return self.meta.exclusive

    def class_names(self) -> list[str]:
        """CSS classes of the member modifiers, in order."""
        return [m.class_name for m in self.modifiers]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "meta": {
                "label": self.meta.display_label,
                "description": self.meta.description,
                "exclusive": self.meta.exclusive,
            },
            "modifiers": [m.to_dict() for m in self.modifiers],
        }


ResolvedGroups = dict[str, CategoryGroup]


class ModifierResolver:
    """
    Resolves block types to grouped modifier lists.

    Precedence:
    1. Wildcard-scope modifiers
    2. Each requested block type, in the order given (last wins per name)
    """

    def __init__(self, registry: ModifierRegistry):
        """
        Initialize the resolver.

        Args:
            registry: Modifier registry (its category store is used for metadata)
        """
        self.registry = registry

    def resolve_modifiers(self, block_types: Scope) -> list[Modifier]:
        """Get the merged, ungrouped modifier list for one or more block types."""
        return list(self.registry.get_modifiers(block_types).values())

    def resolve_for_block(self, block_types: Scope) -> ResolvedGroups:
        """
        Resolve the grouped modifiers for one or more block types.

        Groups are keyed by category slug and ordered by first appearance
        in the merged modifier list. Missing or dangling category
        references land in the uncategorized group.

        Args:
            block_types: Block type or ordered collection of block types

        Returns:
            Mapping of category slug to CategoryGroup
        """
        groups: ResolvedGroups = {}

        for modifier in self.resolve_modifiers(block_types):
            category = self.registry.categories.get_category(modifier.category)
            group = groups.get(category.slug)
            if group is None:
                group = groups[category.slug] = CategoryGroup(meta=category)
            group.modifiers.append(modifier)

        return groups

    def find_by_class(self, block_types: Scope, class_name: str) -> Modifier | None:
        """Find the visible modifier that applies a CSS class."""
        for modifier in self.resolve_modifiers(block_types):
            if modifier.class_name == class_name:
                return modifier
        return None

    def category_for_class(self, groups: ResolvedGroups, class_name: str) -> str | None:
        """Get the category slug whose group contains a CSS class."""
        for slug, group in groups.items():
            if class_name in group.class_names():
                return slug
        return None
