"""
Editor tools - MCP tools for resolving and selecting modifiers on a block.

Selections are owned by the caller (the host stores them on the block);
each tool takes the current selection and returns the new one.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_modifiers.registry import ModifierRegistry
from chuk_mcp_modifiers.rendering import RegistrySnapshot, build_stylesheet, serialize_class_list
from chuk_mcp_modifiers.resolution import ModifierResolver
from chuk_mcp_modifiers.selection import ModifierSelection

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_editor_tools(
    mcp: ChukMCPServer,
    registry: ModifierRegistry,
) -> dict[str, Any]:
    """
    Register editor tools with the MCP server.

    Args:
        mcp: The MCP server instance
        registry: The live modifier registry

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    resolver = ModifierResolver(registry)

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_resolve_block(block_types: str | list[str]) -> str:
        """
        Get the modifiers available to a block, grouped by category.

        Global ('*') modifiers are merged first, then each block type in
        order; later definitions win on name collisions.

        Args:
            block_types: Block type or list of block types (e.g., 'core/group')

        Returns:
            JSON string with category groups

        Example:
            modifiers_resolve_block(block_types="core/image")
        """
        try:
            groups = resolver.resolve_for_block(block_types)
            return json.dumps(
                {
                    "status": "success",
                    "groups": {slug: group.to_dict() for slug, group in groups.items()},
                    "count": sum(len(g.modifiers) for g in groups.values()),
                }
            )
        except Exception as e:
            logger.exception("Failed to resolve block")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_resolve_block"] = modifiers_resolve_block

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_toggle(
        block_types: str | list[str],
        selection: list[str],
        class_name: str,
        category: str | None = None,
    ) -> str:
        """
        Toggle a modifier in a block's selection.

        In an exclusive category, selecting a modifier replaces the current
        choice and selecting the active one clears it.

        Args:
            block_types: Block type or list of block types
            selection: Current ordered list of selected classes
            class_name: Class of the modifier to toggle
            category: Category slug (inferred from the class if omitted)

        Returns:
            JSON string with the new selection

        Example:
            modifiers_toggle(
                block_types="core/group",
                selection=["bsm-fade-in"],
                class_name="bsm-slide-up"
            )
        """
        try:
            groups = resolver.resolve_for_block(block_types)
            if category is None:
                category = resolver.category_for_class(groups, class_name)

            state = ModifierSelection(groups, selection)
            return json.dumps(
                {
                    "status": "success",
                    "selection": state.toggle(class_name, category),
                }
            )
        except Exception as e:
            logger.exception("Failed to toggle modifier")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_toggle"] = modifiers_toggle

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_reorder(
        block_types: str | list[str],
        selection: list[str],
        from_index: int,
        to_index: int,
    ) -> str:
        """
        Move a selected modifier to a new position.

        Args:
            block_types: Block type or list of block types
            selection: Current ordered list of selected classes
            from_index: Index of the entry to move
            to_index: Destination index

        Returns:
            JSON string with the new selection

        Example:
            modifiers_reorder(block_types="core/group", selection=["a", "b"], from_index=1, to_index=0)
        """
        try:
            state = ModifierSelection(resolver.resolve_for_block(block_types), selection)
            return json.dumps(
                {
                    "status": "success",
                    "selection": state.reorder(from_index, to_index),
                }
            )
        except IndexError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to reorder selection")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_reorder"] = modifiers_reorder

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_clear_category(
        block_types: str | list[str],
        selection: list[str],
        category: str,
    ) -> str:
        """
        Remove every selected modifier of a category.

        Args:
            block_types: Block type or list of block types
            selection: Current ordered list of selected classes
            category: Category slug to clear

        Returns:
            JSON string with the new selection

        Example:
            modifiers_clear_category(block_types="core/group", selection=["bsm-fade-in"], category="animations")
        """
        try:
            state = ModifierSelection(resolver.resolve_for_block(block_types), selection)
            return json.dumps(
                {
                    "status": "success",
                    "selection": state.clear_category(category),
                }
            )
        except Exception as e:
            logger.exception("Failed to clear category")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_clear_category"] = modifiers_clear_category

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_render_classes(selection: list[str], existing: str = "") -> str:
        """
        Build the class attribute for a block.

        Args:
            selection: Ordered list of selected classes
            existing: Class attribute from other sources

        Returns:
            JSON string with the class attribute value

        Example:
            modifiers_render_classes(selection=["bsm-fade-in"], existing="wp-block-group")
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "class_name": serialize_class_list(existing, selection),
                }
            )
        except Exception as e:
            logger.exception("Failed to render classes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_render_classes"] = modifiers_render_classes

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_stylesheet() -> str:
        """
        Get the aggregate stylesheet of all registered modifiers.

        Returns:
            JSON string with the stylesheet text

        Example:
            modifiers_stylesheet()
        """
        try:
            return json.dumps({"status": "success", "stylesheet": build_stylesheet(registry)})
        except Exception as e:
            logger.exception("Failed to build stylesheet")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_stylesheet"] = modifiers_stylesheet

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_snapshot() -> str:
        """
        Get a read-only snapshot of the full registry.

        The snapshot holds every category, every modifier by scope and the
        stylesheet. Take a new snapshot after definitions change.

        Returns:
            JSON string with the snapshot

        Example:
            modifiers_snapshot()
        """
        try:
            snapshot = RegistrySnapshot.from_registry(registry)
            return json.dumps({"status": "success", "snapshot": snapshot.to_dict()})
        except Exception as e:
            logger.exception("Failed to snapshot registry")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_snapshot"] = modifiers_snapshot

    return tools
