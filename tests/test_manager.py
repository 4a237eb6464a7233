"""
Tests for the definition manager.

Tests cover:
- Settings round-trip and reload
- Category and modifier CRUD against the option store
- Validation, conflict and not-found errors
"""

import pytest

from chuk_mcp_modifiers.constants import (
    OPTION_CUSTOM_CATEGORIES,
    OPTION_CUSTOM_MODIFIERS,
    OPTION_ENABLE_DEFAULTS,
    ErrorCodes,
)
from chuk_mcp_modifiers.loader import DefinitionLoader
from chuk_mcp_modifiers.management import (
    ConflictError,
    DefinitionManager,
    InvalidFieldError,
    NotFoundError,
)
from chuk_mcp_modifiers.registry import ModifierRegistry
from chuk_mcp_modifiers.resolution import ModifierResolver
from chuk_mcp_modifiers.storage import MemoryOptionStore


@pytest.fixture
def store() -> MemoryOptionStore:
    """Store with defaults disabled so only custom entries are registered."""
    return MemoryOptionStore({OPTION_ENABLE_DEFAULTS: "0"})


@pytest.fixture
def manager(registry: ModifierRegistry, store: MemoryOptionStore) -> DefinitionManager:
    loader = DefinitionLoader(registry, store)
    loader.load()
    return DefinitionManager(loader)


class TestSettings:
    """Tests for settings management."""

    @pytest.mark.asyncio
    async def test_get_settings(self, manager: DefinitionManager):
        settings = await manager.get_settings()
        assert settings.enable_default_modifiers is False

    @pytest.mark.asyncio
    async def test_enable_defaults_reloads(self, manager: DefinitionManager, store: MemoryOptionStore):
        """Turning defaults on registers the built-in library immediately."""
        settings = await manager.update_settings(True)

        assert settings.enable_default_modifiers is True
        assert store.get(OPTION_ENABLE_DEFAULTS) == "1"
        assert manager.registry.get_modifier("core/group", "fade-in") is not None

        await manager.update_settings("0")
        assert len(manager.registry) == 0


class TestCategoryManagement:
    """Tests for custom category CRUD."""

    @pytest.mark.asyncio
    async def test_create(self, manager: DefinitionManager, store: MemoryOptionStore):
        entry = await manager.create_category("borders", " Borders ", "Edge styles", "1")

        assert entry == {
            "slug": "borders",
            "label": "Borders",
            "description": "Edge styles",
            "exclusive": True,
        }
        assert store.get(OPTION_CUSTOM_CATEGORIES) == [entry]
        assert manager.registry.categories.get_category("borders").exclusive is True

    @pytest.mark.asyncio
    async def test_create_duplicate(self, manager: DefinitionManager):
        await manager.create_category("borders", "Borders")

        with pytest.raises(ConflictError) as exc_info:
            await manager.create_category("borders", "Again")
        assert exc_info.value.code == ErrorCodes.CATEGORY_EXISTS
        assert exc_info.value.status == 400
        assert len(await manager.list_categories()) == 1

    @pytest.mark.asyncio
    async def test_create_invalid(self, manager: DefinitionManager):
        """Missing or malformed fields are rejected with the field name."""
        with pytest.raises(InvalidFieldError) as exc_info:
            await manager.create_category("", "Label")
        assert exc_info.value.field == "slug"
        assert exc_info.value.code == ErrorCodes.INVALID_PARAM

        with pytest.raises(InvalidFieldError):
            await manager.create_category("two words", "Label")

        with pytest.raises(InvalidFieldError) as exc_info:
            await manager.create_category("ok", "   ")
        assert exc_info.value.field == "label"

        assert await manager.list_categories() == []

    @pytest.mark.asyncio
    async def test_non_string_description(self, manager: DefinitionManager):
        """A non-text description is a field error, not a crash."""
        with pytest.raises(InvalidFieldError) as exc_info:
            await manager.create_category("borders", "Borders", description=5)
        assert exc_info.value.field == "description"
        assert exc_info.value.code == ErrorCodes.INVALID_PARAM

    @pytest.mark.asyncio
    async def test_update(self, manager: DefinitionManager):
        await manager.create_category("borders", "Borders", exclusive=True)
        entry = await manager.update_category("borders", "Edges", exclusive=False)

        assert entry["label"] == "Edges"
        category = manager.registry.categories.get_category("borders")
        assert category.label == "Edges"
        assert category.exclusive is False

    @pytest.mark.asyncio
    async def test_update_missing(self, manager: DefinitionManager):
        with pytest.raises(NotFoundError) as exc_info:
            await manager.update_category("missing", "Label")
        assert exc_info.value.code == ErrorCodes.CATEGORY_NOT_FOUND
        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_delete_keeps_modifiers(self, manager: DefinitionManager):
        """Modifiers of a deleted category resolve as uncategorized."""
        await manager.create_category("borders", "Borders", exclusive=True)
        await manager.create_modifier(
            "thick", "Thick", "has-thick-border", ["core/group"], category="borders"
        )

        await manager.delete_category("borders")

        groups = ModifierResolver(manager.registry).resolve_for_block("core/group")
        assert list(groups) == ["uncategorized"]
        assert groups["uncategorized"].exclusive is False
        assert groups["uncategorized"].class_names() == ["has-thick-border"]

    @pytest.mark.asyncio
    async def test_delete_missing(self, manager: DefinitionManager):
        with pytest.raises(NotFoundError):
            await manager.delete_category("missing")


class TestModifierManagement:
    """Tests for custom modifier CRUD."""

    @pytest.mark.asyncio
    async def test_create(self, manager: DefinitionManager, store: MemoryOptionStore):
        entry = await manager.create_modifier(
            "thick",
            "Thick Border",
            "has-thick-border",
            ["core/group", "core/cover", "core/group"],
            description="Adds a thick border",
            inline_style="<b>.has-thick-border { border: 4px solid; }</b><script>x()</script>",
        )

        assert entry["class"] == "has-thick-border"
        assert entry["blocks"] == ["core/group", "core/cover"]
        assert entry["inline_style"] == ".has-thick-border { border: 4px solid; }"
        assert store.get(OPTION_CUSTOM_MODIFIERS) == [entry]

        assert manager.registry.list_scopes() == ["core/group", "core/cover"]
        assert manager.registry.collect_inline_styles() == (
            ".has-thick-border { border: 4px solid; }\n.has-thick-border { border: 4px solid; }"
        )

    @pytest.mark.asyncio
    async def test_create_wildcard(self, manager: DefinitionManager):
        """A '*' blocks string is stored as given and applies everywhere."""
        entry = await manager.create_modifier("outline", "Outline", "debug-outline", "*")

        assert entry["blocks"] == "*"
        assert manager.registry.get_modifiers("core/paragraph")["outline"].class_name == "debug-outline"

    @pytest.mark.asyncio
    async def test_create_duplicate(self, manager: DefinitionManager):
        await manager.create_modifier("thick", "Thick", "a", "core/group")

        with pytest.raises(ConflictError) as exc_info:
            await manager.create_modifier("thick", "Thick", "b", "core/cover")
        assert exc_info.value.code == ErrorCodes.MODIFIER_EXISTS

    @pytest.mark.asyncio
    async def test_create_invalid(self, manager: DefinitionManager):
        with pytest.raises(InvalidFieldError) as exc_info:
            await manager.create_modifier("thick", "Thick", "", "core/group")
        assert exc_info.value.field == "class"

        with pytest.raises(InvalidFieldError) as exc_info:
            await manager.create_modifier("thick", "Thick", "a", [])
        assert exc_info.value.field == "blocks"

        with pytest.raises(InvalidFieldError) as exc_info:
            await manager.create_modifier("thick", "Thick", "a", "core/group", category="bad slug")
        assert exc_info.value.field == "category"

        assert await manager.list_modifiers() == []

    @pytest.mark.asyncio
    async def test_non_string_text_fields(self, manager: DefinitionManager):
        """Non-text description or inline style is rejected with the field name."""
        with pytest.raises(InvalidFieldError) as exc_info:
            await manager.create_modifier("thick", "Thick", "a", "core/group", description=["x"])
        assert exc_info.value.field == "description"

        with pytest.raises(InvalidFieldError) as exc_info:
            await manager.create_modifier("thick", "Thick", "a", "core/group", inline_style=3)
        assert exc_info.value.field == "inline_style"

        assert await manager.list_modifiers() == []

    @pytest.mark.asyncio
    async def test_error_payload(self, manager: DefinitionManager):
        """Errors convert to the structured payload."""
        with pytest.raises(NotFoundError) as exc_info:
            await manager.delete_modifier("missing")

        payload = exc_info.value.to_dict()
        assert payload["status"] == "error"
        assert payload["code"] == ErrorCodes.MODIFIER_NOT_FOUND
        assert payload["http_status"] == 404
        assert payload["field"] == "name"

    @pytest.mark.asyncio
    async def test_update(self, manager: DefinitionManager):
        await manager.create_modifier("thick", "Thick", "a", "core/group")
        await manager.update_modifier("thick", "Thicker", "b", ["core/cover"])

        assert manager.registry.get_modifier("core/group", "thick") is None
        modifier = manager.registry.get_modifier("core/cover", "thick")
        assert modifier.class_name == "b"
        assert modifier.label == "Thicker"

    @pytest.mark.asyncio
    async def test_update_missing(self, manager: DefinitionManager):
        with pytest.raises(NotFoundError):
            await manager.update_modifier("missing", "Label", "a", "core/group")

    @pytest.mark.asyncio
    async def test_delete(self, manager: DefinitionManager):
        await manager.create_modifier("thick", "Thick", "a", "core/group")
        await manager.delete_modifier("thick")

        assert await manager.list_modifiers() == []
        assert len(manager.registry) == 0

    @pytest.mark.asyncio
    async def test_custom_overrides_default(self, registry: ModifierRegistry):
        """A custom modifier sharing a default's name wins on its scopes."""
        loader = DefinitionLoader(registry, MemoryOptionStore())
        loader.load()
        manager = DefinitionManager(loader)

        await manager.create_modifier(
            "fade-in", "Fade", "my-fade", "core/group", category="animations"
        )
        assert registry.get_modifier("core/group", "fade-in").class_name == "my-fade"
        assert registry.get_modifier("core/row", "fade-in").class_name == "bsm-fade-in"
