"""
Modifier registry - modifier definitions keyed by block-type scope.

Storage is a two-level mapping: scope (block type or wildcard) to
modifier name to Modifier record. Names are unique per scope only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from chuk_mcp_modifiers.constants import WILDCARD_SCOPE
from chuk_mcp_modifiers.models.category import Category, coerce_text, is_valid_identifier
from chuk_mcp_modifiers.models.modifier import Modifier
from chuk_mcp_modifiers.registry.categories import CategoryStore

logger = logging.getLogger(__name__)

Scope = str | Iterable[str]


def normalize_scopes(scope: Any) -> list[str] | None:
    """
    Normalize a scope argument into an ordered list of scope identifiers.

    Accepts a single string or a non-empty collection of strings.
    Duplicates are dropped, first occurrence wins.

    Returns:
        The scope list, or None if the argument is not a valid scope
    """
    if isinstance(scope, str):
        return [scope] if scope else None

    if isinstance(scope, Mapping) or not isinstance(scope, Iterable):
        return None

    scopes: list[str] = []
    for item in scope:
        if not isinstance(item, str) or not item:
            return None
        if item not in scopes:
            scopes.append(item)

    return scopes or None


class ModifierRegistry:
    """
    Holds modifier definitions for every scope.

    Inline category literals passed at registration time are registered
    in the category store and collapsed to their slug; a stored Modifier
    never embeds a Category.
    """

    def __init__(self, categories: CategoryStore | None = None):
        """
        Initialize the registry.

        Args:
            categories: Category store receiving inline category literals
        """
        self.categories = categories if categories is not None else CategoryStore()
        self._scopes: dict[str, dict[str, Modifier]] = {}

    def register_modifier(self, scope: Scope, modifier: Mapping[str, Any] | Modifier) -> bool:
        """
        Register a modifier for one or more scopes.

        A collection of scopes fans out into one independent record per
        scope. Re-registering (scope, name) replaces the previous record.

        Args:
            scope: Block type, wildcard, or collection of block types
            modifier: Modifier record or mapping with name/label/class/
                description/category/inline_style keys

        Returns:
            True if stored, False if validation rejected the call
        """
        scopes = normalize_scopes(scope)
        if scopes is None:
            logger.warning("Ignoring modifier registration with invalid scope: %r", scope)
            return False

        if isinstance(modifier, Modifier):
            data = modifier.to_dict()
        elif isinstance(modifier, Mapping):
            data = dict(modifier)
        else:
            logger.warning("Ignoring modifier definition that is not a mapping: %r", modifier)
            return False

        record = self._build_modifier(data)
        if record is None:
            return False

        for item in scopes:
            self._scopes.setdefault(item, {})[record.name] = record

        logger.debug("Registered modifier '%s' for %s", record.name, ", ".join(scopes))
        return True

    def get_modifier(self, scope: str, name: str) -> Modifier | None:
        """Get the record stored for an exact (scope, name) pair."""
        return self._scopes.get(scope, {}).get(name)

    def get_modifiers(self, scope: Scope) -> dict[str, Modifier]:
        """
        Get the merged name to Modifier mapping visible for the given scope(s).

        The wildcard set is applied first, then each requested block type
        in order; later sets win on name collisions.
        """
        merged: dict[str, Modifier] = dict(self._scopes.get(WILDCARD_SCOPE, {}))

        for item in normalize_scopes(scope) or []:
            if item == WILDCARD_SCOPE:
                continue
            merged.update(self._scopes.get(item, {}))

        return merged

    def update_modifier(self, scope: str, name: str, fields: Mapping[str, Any]) -> bool:
        """
        Update fields of the record stored for (scope, name).

        The name itself cannot be changed. The record keeps its position
        in registration order.

        Returns:
            True if updated, False if absent or the result is invalid
        """
        existing = self.get_modifier(scope, name)
        if existing is None:
            return False

        data = existing.to_dict()
        data.update(fields)
        if "class_name" in fields:
            data["class"] = fields["class_name"]
        data["name"] = name

        record = self._build_modifier(data)
        if record is None:
            return False

        self._scopes[scope][name] = record
        return True

    def delete_modifier(self, scope: str, name: str) -> bool:
        """
        Delete the record stored for (scope, name).

        Returns:
            True if deleted, False if absent
        """
        modifiers = self._scopes.get(scope)
        if modifiers is None or name not in modifiers:
            return False

        del modifiers[name]
        if not modifiers:
            del self._scopes[scope]
        return True

    def list_scopes(self) -> list[str]:
        """List scopes that hold at least one modifier, in registration order."""
        return list(self._scopes)

    def iter_modifiers(self) -> Iterable[tuple[str, Modifier]]:
        """Yield (scope, modifier) pairs in registration order."""
        for scope, modifiers in self._scopes.items():
            for modifier in modifiers.values():
                yield scope, modifier

    def collect_inline_styles(self) -> str:
        """
        Concatenate the inline style of every stored modifier.

        Fragments are emitted verbatim, newline-separated, in registration
        order across all scopes; only the combined text is trimmed.
        """
        styles = ""
        for _scope, modifier in self.iter_modifiers():
            if modifier.inline_style:
                styles += "\n" + modifier.inline_style
        return styles.strip()

    def to_dict(self) -> dict[str, dict[str, dict[str, Any]]]:
        """Convert the scope map to plain dictionaries."""
        return {
            scope: {name: modifier.to_dict() for name, modifier in modifiers.items()}
            for scope, modifiers in self._scopes.items()
        }

    def clear(self) -> None:
        """Remove every modifier (categories are left alone)."""
        self._scopes.clear()

    def __len__(self) -> int:
        return sum(len(modifiers) for modifiers in self._scopes.values())

    def _build_modifier(self, data: dict[str, Any]) -> Modifier | None:
        """Validate a modifier mapping and build the stored record."""
        name = data.get("name")
        if not is_valid_identifier(name):
            logger.warning("Ignoring modifier with invalid name: %r", name)
            return None

        class_name = data.get("class", data.get("class_name"))
        if not isinstance(class_name, str) or not class_name:
            logger.warning("Ignoring modifier '%s' without a class", name)
            return None

        return Modifier(
            name=name,
            label=coerce_text(data.get("label")) or name,
            class_name=class_name,
            description=coerce_text(data.get("description")),
            category=self._collapse_category(data.get("category")),
            inline_style=coerce_text(data.get("inline_style")),
        )

    def _collapse_category(self, category: Any) -> str:
        """Register an inline category literal and return its slug reference."""
        if isinstance(category, Category):
            category = category.to_dict()

        if isinstance(category, Mapping):
            if self.categories.register_from_dict(dict(category)):
                return str(category["slug"])
            return ""

        if isinstance(category, str):
            return category

        return ""
