"""
Modifier tools - MCP tools for managing custom modifiers.

Modifiers are keyed by name; the blocks field scopes them to block
types ('*' for every block).
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_modifiers.constants import SuccessMessages
from chuk_mcp_modifiers.management import DefinitionManager, ManagementError

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_modifier_tools(
    mcp: ChukMCPServer,
    manager: DefinitionManager,
) -> dict[str, Any]:
    """
    Register modifier management tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The definition manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_list_modifiers() -> str:
        """
        List custom modifiers.

        Returns:
            JSON string with the persisted custom modifiers and the scopes
            currently registered

        Example:
            modifiers_list_modifiers()
        """
        try:
            custom = await manager.list_modifiers()
            return json.dumps(
                {
                    "status": "success",
                    "modifiers": custom,
                    "count": len(custom),
                    "scopes": manager.registry.list_scopes(),
                }
            )
        except Exception as e:
            logger.exception("Failed to list modifiers")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_list_modifiers"] = modifiers_list_modifiers

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_create_modifier(
        name: str,
        label: str,
        class_name: str,
        blocks: str | list[str],
        description: str = "",
        category: str = "",
        inline_style: str = "",
    ) -> str:
        """
        Create a custom modifier.

        Args:
            name: Unique name without whitespace (e.g., 'rounded-corners')
            label: Display label
            class_name: CSS class added to the block when selected
            blocks: Block type, '*' for all blocks, or a list of block types
            description: Optional description
            category: Optional category slug
            inline_style: Optional CSS for the class

        Returns:
            JSON string with the created modifier

        Example:
            modifiers_create_modifier(
                name="rounded",
                label="Rounded corners",
                class_name="is-rounded",
                blocks=["core/image"],
                inline_style=".is-rounded img { border-radius: 16px; }"
            )
        """
        try:
            modifier = await manager.create_modifier(
                name=name,
                label=label,
                class_name=class_name,
                blocks=blocks,
                description=description,
                category=category,
                inline_style=inline_style,
            )
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.MODIFIER_CREATED.format(name=name),
                    "data": modifier,
                }
            )
        except ManagementError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to create modifier")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_create_modifier"] = modifiers_create_modifier

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_update_modifier(
        name: str,
        label: str,
        class_name: str,
        blocks: str | list[str],
        description: str = "",
        category: str = "",
        inline_style: str = "",
    ) -> str:
        """
        Update a custom modifier.

        All fields are replaced; omitted optional fields are reset.

        Args:
            name: Name of the modifier to update
            label: Display label
            class_name: CSS class
            blocks: Block type, '*' for all blocks, or a list of block types
            description: Optional description
            category: Optional category slug
            inline_style: Optional CSS for the class

        Returns:
            JSON string with the updated modifier

        Example:
            modifiers_update_modifier(
                name="rounded", label="Rounded", class_name="is-rounded", blocks="*"
            )
        """
        try:
            modifier = await manager.update_modifier(
                name=name,
                label=label,
                class_name=class_name,
                blocks=blocks,
                description=description,
                category=category,
                inline_style=inline_style,
            )
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.MODIFIER_UPDATED.format(name=name),
                    "data": modifier,
                }
            )
        except ManagementError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to update modifier")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_update_modifier"] = modifiers_update_modifier

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_delete_modifier(name: str) -> str:
        """
        Delete a custom modifier.

        Args:
            name: Name of the modifier to delete

        Returns:
            JSON string with status

        Example:
            modifiers_delete_modifier(name="rounded")
        """
        try:
            await manager.delete_modifier(name)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.MODIFIER_DELETED.format(name=name),
                }
            )
        except ManagementError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to delete modifier")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_delete_modifier"] = modifiers_delete_modifier

    return tools
