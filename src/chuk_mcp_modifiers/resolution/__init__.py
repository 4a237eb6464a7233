"""
Resolution engine - merges scopes and groups modifiers by category.
"""

from chuk_mcp_modifiers.resolution.resolver import (
    CategoryGroup,
    ModifierResolver,
    ResolvedGroups,
)

__all__ = [
    "CategoryGroup",
    "ModifierResolver",
    "ResolvedGroups",
]
