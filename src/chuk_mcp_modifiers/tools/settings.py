"""
Settings tools - MCP tools for the plugin settings.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_modifiers.constants import SuccessMessages
from chuk_mcp_modifiers.management import DefinitionManager

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_settings_tools(
    mcp: ChukMCPServer,
    manager: DefinitionManager,
) -> dict[str, Any]:
    """
    Register settings tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The definition manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_get_settings() -> str:
        """
        Get plugin settings.

        Returns:
            JSON string with the settings

        Example:
            modifiers_get_settings()
        """
        try:
            settings = await manager.get_settings()
            return json.dumps({"status": "success", "settings": settings.model_dump()})
        except Exception as e:
            logger.exception("Failed to get settings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_get_settings"] = modifiers_get_settings

    @mcp.tool  # type: ignore[arg-type]
    async def modifiers_update_settings(enable_default_modifiers: bool) -> str:
        """
        Update plugin settings.

        Disabling default modifiers removes the built-in library from the
        registry; custom modifiers are unaffected.

        Args:
            enable_default_modifiers: Whether to load the built-in modifiers

        Returns:
            JSON string with the saved settings

        Example:
            modifiers_update_settings(enable_default_modifiers=False)
        """
        try:
            settings = await manager.update_settings(enable_default_modifiers)
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SETTINGS_SAVED,
                    "settings": settings.model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to update settings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["modifiers_update_settings"] = modifiers_update_settings

    return tools
