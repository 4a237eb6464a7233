"""
Modifier selection - the ordered set of classes applied to one block.

All mutation goes through the transition methods so that exclusive
categories never hold more than one selected class.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from chuk_mcp_modifiers.resolution.resolver import ResolvedGroups

logger = logging.getLogger(__name__)


class ModifierSelection:
    """
    Selection state machine for a single block instance.

    The selection is an insertion-ordered set of CSS classes. Order is
    user-controlled (see reorder) and drives rendering order.

    Transitions:
    - toggle: exclusive categories switch or deselect, others flip membership
    - reorder: move one entry to another index
    - clear_category: drop every class of one category
    """

    def __init__(self, groups: ResolvedGroups, classes: Iterable[str] | None = None):
        """
        Initialize the selection.

        Args:
            groups: Resolved category groups for the block (read-only)
            classes: Stored selection to start from; duplicates are dropped
                and only the first class per exclusive category is kept
        """
        self.groups = groups
        self._classes: dict[str, None] = {}

        seen_exclusive: set[str] = set()
        for class_name in classes or []:
            if class_name in self._classes:
                continue
            slug = self._exclusive_category_of(class_name)
            if slug is not None:
                if slug in seen_exclusive:
                    logger.debug("Dropping '%s': category '%s' already selected", class_name, slug)
                    continue
                seen_exclusive.add(slug)
            self._classes[class_name] = None

    @property
    def classes(self) -> list[str]:
        """Selected classes in order."""
        return list(self._classes)

    def toggle(self, class_name: str, category_slug: str | None = None) -> list[str]:
        """
        Toggle a modifier class.

        For an exclusive category every class of the category is removed;
        the toggled class is then appended only if it was not selected
        before the call. Clicking the active choice therefore deselects it
        and clicking another choice switches to it. Unknown categories are
        treated as non-exclusive.

        Args:
            class_name: CSS class of the modifier
            category_slug: Category slug of the modifier

        Returns:
            The selection after the transition
        """
        group = self.groups.get(category_slug) if category_slug else None
        was_selected = class_name in self._classes

        if group is not None and group.exclusive:
            members = set(group.class_names())
            members.add(class_name)
            self._classes = {c: None for c in self._classes if c not in members}
            if not was_selected:
                self._classes[class_name] = None
        elif was_selected:
            del self._classes[class_name]
        else:
            self._classes[class_name] = None

        return self.classes

    def reorder(self, from_index: int, to_index: int) -> list[str]:
        """
        Move the entry at from_index to to_index.

        Raises:
            IndexError: If either index is out of range
        """
        size = len(self._classes)
        if not (0 <= from_index < size and 0 <= to_index < size):
            raise IndexError(f"Reorder indices out of range: {from_index} -> {to_index} (size {size})")

        if from_index == to_index:
            return self.classes

        order = list(self._classes)
        moved = order.pop(from_index)
        order.insert(to_index, moved)
        self._classes = dict.fromkeys(order)
        return self.classes

    def clear_category(self, category_slug: str) -> list[str]:
        """Remove every selected class that belongs to a category."""
        group = self.groups.get(category_slug)
        if group is None:
            return self.classes

        members = set(group.class_names())
        self._classes = {c: None for c in self._classes if c not in members}
        return self.classes

    def selected_in(self, category_slug: str) -> list[str]:
        """Selected classes belonging to a category, in selection order."""
        group = self.groups.get(category_slug)
        if group is None:
            return []
        members = set(group.class_names())
        return [c for c in self._classes if c in members]

    def _exclusive_category_of(self, class_name: str) -> str | None:
        for slug, group in self.groups.items():
            if group.exclusive and class_name in group.class_names():
                return slug
        return None

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._classes

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._classes))

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return f"ModifierSelection({self.classes!r})"
