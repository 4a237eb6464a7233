"""
MCP tool implementations.

Tools are organized by domain:
- categories - Custom category CRUD
- modifiers - Custom modifier CRUD
- settings - Plugin settings
- editor - Resolution, selection and rendering for a block
"""

from chuk_mcp_modifiers.tools.categories import register_category_tools
from chuk_mcp_modifiers.tools.editor import register_editor_tools
from chuk_mcp_modifiers.tools.modifiers import register_modifier_tools
from chuk_mcp_modifiers.tools.settings import register_settings_tools

__all__ = [
    "register_category_tools",
    "register_editor_tools",
    "register_modifier_tools",
    "register_settings_tools",
]
