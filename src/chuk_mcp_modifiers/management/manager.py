"""
Definition Manager - administrative CRUD for custom definitions.

Custom categories and modifiers are persisted in the option store and
replayed into the registry. Every successful mutation reloads the
registry, so the next snapshot reflects it.
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_mcp_modifiers.constants import (
    OPTION_CUSTOM_CATEGORIES,
    OPTION_CUSTOM_MODIFIERS,
    ErrorCodes,
    ErrorMessages,
)
from chuk_mcp_modifiers.loader import DefinitionLoader
from chuk_mcp_modifiers.management.errors import ConflictError, InvalidFieldError, NotFoundError
from chuk_mcp_modifiers.models.category import coerce_bool, is_valid_identifier
from chuk_mcp_modifiers.registry.modifiers import ModifierRegistry, normalize_scopes
from chuk_mcp_modifiers.rendering.stylesheet import sanitize_css
from chuk_mcp_modifiers.settings import PluginSettings

logger = logging.getLogger(__name__)


class DefinitionManager:
    """
    Manages persisted custom definitions and the plugin settings.

    Creates reject duplicates among persisted custom entries; updates and
    deletes reject unknown keys. Built-in defaults are not editable here.
    """

    def __init__(self, loader: DefinitionLoader):
        """
        Initialize the manager.

        Args:
            loader: Loader bound to the registry and option store
        """
        self.loader = loader
        self.store = loader.store

    @property
    def registry(self) -> ModifierRegistry:
        """The live registry the loader populates."""
        return self.loader.registry

    # Settings

    async def get_settings(self) -> PluginSettings:
        """Get the current plugin settings."""
        return PluginSettings.load(self.store)

    async def update_settings(self, enable_default_modifiers: Any) -> PluginSettings:
        """
        Update the plugin settings.

        Args:
            enable_default_modifiers: Whether to load the built-in library

        Returns:
            The saved settings
        """
        settings = PluginSettings(enable_default_modifiers=enable_default_modifiers)
        settings.save(self.store)
        self.loader.reload()
        return settings

    # Categories

    async def list_categories(self) -> list[dict[str, Any]]:
        """List persisted custom categories."""
        return self._categories()

    async def create_category(
        self,
        slug: str,
        label: str,
        description: str = "",
        exclusive: Any = False,
    ) -> dict[str, Any]:
        """
        Create a custom category.

        Args:
            slug: Unique category slug
            label: Display label
            description: Display description
            exclusive: Whether the category is exclusive

        Returns:
            The stored category entry
        """
        entry = self._category_entry(slug, label, description, exclusive)
        categories = self._categories()

        if self._index_of(categories, "slug", slug) is not None:
            raise ConflictError(
                ErrorMessages.CATEGORY_EXISTS.format(slug=slug),
                code=ErrorCodes.CATEGORY_EXISTS,
                field="slug",
            )

        categories.append(entry)
        self._save(OPTION_CUSTOM_CATEGORIES, categories)
        logger.info("Created category '%s'", slug)
        return entry

    async def update_category(
        self,
        slug: str,
        label: str,
        description: str = "",
        exclusive: Any = False,
    ) -> dict[str, Any]:
        """
        Replace a custom category.

        Returns:
            The stored category entry
        """
        entry = self._category_entry(slug, label, description, exclusive)
        categories = self._categories()
        index = self._index_of(categories, "slug", slug)

        if index is None:
            raise NotFoundError(
                ErrorMessages.CATEGORY_NOT_FOUND.format(slug=slug),
                code=ErrorCodes.CATEGORY_NOT_FOUND,
                field="slug",
            )

        categories[index] = entry
        self._save(OPTION_CUSTOM_CATEGORIES, categories)
        logger.info("Updated category '%s'", slug)
        return entry

    async def delete_category(self, slug: str) -> None:
        """
        Delete a custom category.

        Modifiers referencing the slug are kept and resolve as uncategorized.
        """
        categories = self._categories()
        index = self._index_of(categories, "slug", slug)

        if index is None:
            raise NotFoundError(
                ErrorMessages.CATEGORY_NOT_FOUND.format(slug=slug),
                code=ErrorCodes.CATEGORY_NOT_FOUND,
                field="slug",
            )

        del categories[index]
        self._save(OPTION_CUSTOM_CATEGORIES, categories)
        logger.info("Deleted category '%s'", slug)

    # Modifiers

    async def list_modifiers(self) -> list[dict[str, Any]]:
        """List persisted custom modifiers."""
        return self._modifiers()

    async def create_modifier(
        self,
        name: str,
        label: str,
        class_name: str,
        blocks: str | list[str],
        description: str = "",
        category: str = "",
        inline_style: str = "",
    ) -> dict[str, Any]:
        """
        Create a custom modifier.

        Args:
            name: Unique modifier name
            label: Display label
            class_name: CSS class applied when selected
            blocks: Block type, '*' or list of block types
            description: Display description
            category: Category slug (empty for uncategorized)
            inline_style: Stylesheet fragment (markup is stripped)

        Returns:
            The stored modifier entry
        """
        entry = self._modifier_entry(
            name, label, class_name, blocks, description, category, inline_style
        )
        modifiers = self._modifiers()

        if self._index_of(modifiers, "name", name) is not None:
            raise ConflictError(
                ErrorMessages.MODIFIER_EXISTS.format(name=name),
                code=ErrorCodes.MODIFIER_EXISTS,
                field="name",
            )

        modifiers.append(entry)
        self._save(OPTION_CUSTOM_MODIFIERS, modifiers)
        logger.info("Created modifier '%s'", name)
        return entry

    async def update_modifier(
        self,
        name: str,
        label: str,
        class_name: str,
        blocks: str | list[str],
        description: str = "",
        category: str = "",
        inline_style: str = "",
    ) -> dict[str, Any]:
        """
        Replace a custom modifier.

        Returns:
            The stored modifier entry
        """
        entry = self._modifier_entry(
            name, label, class_name, blocks, description, category, inline_style
        )
        modifiers = self._modifiers()
        index = self._index_of(modifiers, "name", name)

        if index is None:
            raise NotFoundError(
                ErrorMessages.MODIFIER_NOT_FOUND.format(name=name),
                code=ErrorCodes.MODIFIER_NOT_FOUND,
                field="name",
            )

        modifiers[index] = entry
        self._save(OPTION_CUSTOM_MODIFIERS, modifiers)
        logger.info("Updated modifier '%s'", name)
        return entry

    async def delete_modifier(self, name: str) -> None:
        """Delete a custom modifier."""
        modifiers = self._modifiers()
        index = self._index_of(modifiers, "name", name)

        if index is None:
            raise NotFoundError(
                ErrorMessages.MODIFIER_NOT_FOUND.format(name=name),
                code=ErrorCodes.MODIFIER_NOT_FOUND,
                field="name",
            )

        del modifiers[index]
        self._save(OPTION_CUSTOM_MODIFIERS, modifiers)
        logger.info("Deleted modifier '%s'", name)

    # Helpers

    def _categories(self) -> list[dict[str, Any]]:
        return list(self.store.get(OPTION_CUSTOM_CATEGORIES, []) or [])

    def _modifiers(self) -> list[dict[str, Any]]:
        return list(self.store.get(OPTION_CUSTOM_MODIFIERS, []) or [])

    def _save(self, key: str, entries: list[dict[str, Any]]) -> None:
        self.store.set(key, entries)
        self.loader.reload()

    @staticmethod
    def _index_of(entries: list[dict[str, Any]], key: str, value: str) -> int | None:
        for index, entry in enumerate(entries):
            if isinstance(entry, dict) and entry.get(key) == value:
                return index
        return None

    def _category_entry(
        self, slug: Any, label: Any, description: Any, exclusive: Any
    ) -> dict[str, Any]:
        """Validate category fields and build the stored entry."""
        _require_identifier("slug", slug)
        _require_text("label", label)
        return {
            "slug": slug,
            "label": label.strip(),
            "description": _optional_text("description", description).strip(),
            "exclusive": coerce_bool(exclusive),
        }

    def _modifier_entry(
        self,
        name: Any,
        label: Any,
        class_name: Any,
        blocks: Any,
        description: Any,
        category: Any,
        inline_style: Any,
    ) -> dict[str, Any]:
        """Validate modifier fields and build the stored entry."""
        _require_identifier("name", name)
        _require_text("label", label)
        _require_identifier("class", class_name)

        scopes = normalize_scopes(blocks)
        if scopes is None:
            raise InvalidFieldError(ErrorMessages.INVALID_BLOCKS, field="blocks")

        if category and not is_valid_identifier(category):
            raise InvalidFieldError(
                ErrorMessages.INVALID_IDENTIFIER.format(field="category"), field="category"
            )

        return {
            "name": name,
            "label": label.strip(),
            "class": class_name,
            "description": _optional_text("description", description).strip(),
            "category": category or "",
            "blocks": blocks if isinstance(blocks, str) else scopes,
            "inline_style": sanitize_css(_optional_text("inline_style", inline_style)),
        }


def _require_identifier(field: str, value: Any) -> None:
    if value is None or value == "":
        raise InvalidFieldError(ErrorMessages.REQUIRED_FIELD.format(field=field), field=field)
    if not is_valid_identifier(value):
        raise InvalidFieldError(ErrorMessages.INVALID_IDENTIFIER.format(field=field), field=field)


def _require_text(field: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidFieldError(ErrorMessages.REQUIRED_FIELD.format(field=field), field=field)


def _optional_text(field: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidFieldError(ErrorMessages.INVALID_TEXT.format(field=field), field=field)
    return value
