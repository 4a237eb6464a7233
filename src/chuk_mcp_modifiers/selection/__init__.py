"""
Selection - per-block ordered set of applied modifier classes.
"""

from chuk_mcp_modifiers.selection.state import ModifierSelection

__all__ = [
    "ModifierSelection",
]
