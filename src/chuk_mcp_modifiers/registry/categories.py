"""
Category store - holds category definitions keyed by slug.

Registration is idempotent: re-registering a slug overwrites the
previous definition. Lookups never fail; a missing slug resolves to
the synthesized "uncategorized" category.
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_mcp_modifiers.models.category import Category, coerce_text, is_valid_identifier

logger = logging.getLogger(__name__)


class CategoryStore:
    """
    Holds category definitions in registration order.

    The store is process-wide state owned by whoever constructs it;
    pass it explicitly to the modifier registry and resolver.
    """

    def __init__(self) -> None:
        self._categories: dict[str, Category] = {}

    def register_category(
        self,
        slug: Any,
        label: str | None = None,
        description: str | None = None,
        exclusive: Any = False,
    ) -> bool:
        """
        Register (or overwrite) a category.

        Args:
            slug: Category identifier (non-empty, no whitespace)
            label: Display label (defaults to the slug)
            description: Display description
            exclusive: Selection discipline; coerced to a strict boolean

        Returns:
            True if registered, False if the slug was rejected
        """
        if not is_valid_identifier(slug):
            logger.warning("Ignoring category with invalid slug: %r", slug)
            return False

        existing = slug in self._categories
        self._categories[slug] = Category(
            slug=slug,
            label=coerce_text(label) or slug,
            description=coerce_text(description),
            exclusive=exclusive,
        )
        logger.debug("%s category '%s'", "Replaced" if existing else "Registered", slug)
        return True

    def register_from_dict(self, data: dict[str, Any]) -> bool:
        """Register a category from a {slug, label, description, exclusive} mapping."""
        return self.register_category(
            data.get("slug"),
            label=data.get("label"),
            description=data.get("description"),
            exclusive=data.get("exclusive", False),
        )

    def get_category(self, slug: str | None) -> Category:
        """
        Get a category by slug.

        Returns the synthesized uncategorized category when the slug is
        empty or unknown.
        """
        if slug and slug in self._categories:
            return self._categories[slug]
        return Category.uncategorized()

    def has_category(self, slug: str) -> bool:
        """Check whether a slug is registered."""
        return slug in self._categories

    def list_categories(self) -> list[Category]:
        """List all categories in registration order."""
        return list(self._categories.values())

    def delete_category(self, slug: str) -> bool:
        """
        Remove a category.

        Modifiers referencing it are left in place and fall back to
        uncategorized at resolution time.

        Returns:
            True if removed, False if it was not registered
        """
        return self._categories.pop(slug, None) is not None

    def clear(self) -> None:
        """Remove every category."""
        self._categories.clear()

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, slug: object) -> bool:
        return slug in self._categories
