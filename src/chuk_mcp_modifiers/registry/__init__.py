"""
Registry - category and modifier definitions.

Populated once per process (defaults, then persisted custom entries)
and read many times while editing and rendering.
"""

from chuk_mcp_modifiers.registry.categories import CategoryStore
from chuk_mcp_modifiers.registry.modifiers import ModifierRegistry, normalize_scopes

__all__ = [
    "CategoryStore",
    "ModifierRegistry",
    "normalize_scopes",
]
