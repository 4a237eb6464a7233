"""
Category tools - MCP tools for managing custom categories.
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


def register_category_tools(
    mcp: ChukMCPServer,
    manager: DefinitionManager,
) -> dict[str, Any]:
    """
    Register category management tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The definition manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_list_categories() -> str:
        """
        List categories.

        Returns the persisted custom categories and every category
        currently registered (defaults included).

        Returns:
            JSON string with category lists

        Example:
            modifiers_list_categories()
        """
        try:
            custom = await manager.list_categories()
            registered = manager.registry.categories.list_categories()

            return json.dumps(
                {
                    "status": "success",
                    "custom": custom,
                    "registered": [c.to_dict() for c in registered],
                    "count": len(registered),
                }
            )
        except Exception as e:
            logger.exception("Failed to list categories")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_list_categories"] = modifiers_list_categories

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_create_category(
        slug: str,
        label: str,
        description: str = "",
        exclusive: bool = False,
    ) -> str:
        """
        Create a custom category.

        Exclusive categories allow one selected modifier per block
        (radio behavior); non-exclusive ones allow any number.

        Args:
            slug: Unique slug without whitespace (e.g., 'borders')
            label: Display label
            description: Optional description
            exclusive: Radio (True) or checkbox (False) behavior

        Returns:
            JSON string with the created category

        Example:
            modifiers_create_category(slug="borders", label="Borders", exclusive=True)
        """
        try:
            category = await manager.create_category(slug, label, description, exclusive)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.CATEGORY_CREATED.format(slug=slug),
                    "data": category,
                }
            )
        except ManagementError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to create category")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_create_category"] = modifiers_create_category

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_update_category(
        slug: str,
        label: str,
        description: str = "",
        exclusive: bool = False,
    ) -> str:
        """
        Update a custom category.

        Args:
            slug: Slug of the category to update
            label: Display label
            description: Optional description
            exclusive: Radio (True) or checkbox (False) behavior

        Returns:
            JSON string with the updated category

        Example:
            modifiers_update_category(slug="borders", label="Borders", exclusive=False)
        """
        try:
            category = await manager.update_category(slug, label, description, exclusive)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.CATEGORY_UPDATED.format(slug=slug),
                    "data": category,
                }
            )
        except ManagementError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to update category")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_update_category"] = modifiers_update_category

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_delete_category(slug: str) -> str:
        """
        Delete a custom category.

        Modifiers that reference it are kept and appear as uncategorized.

        Args:
            slug: Slug of the category to delete

        Returns:
            JSON string with status

        Example:
            modifiers_delete_category(slug="borders")
        """
        try:
            await manager.delete_category(slug)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.CATEGORY_DELETED.format(slug=slug),
                }
            )
        except ManagementError as e:
            return json.dumps(e.to_dict())
        except Exception as e:
            logger.exception("Failed to delete category")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_delete_category"] = modifiers_delete_category

    return tools
