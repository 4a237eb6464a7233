"""
Rendering - the external artifacts produced from the registry.

This module provides:
- serialize_class_list: Class attribute value for a block
- build_stylesheet / sanitize_css: Aggregate stylesheet text
- RegistrySnapshot: Read-only registry view for the presentation layer
"""

from chuk_mcp_modifiers.rendering.serializer import serialize_class_list
from chuk_mcp_modifiers.rendering.snapshot import RegistrySnapshot
from chuk_mcp_modifiers.rendering.stylesheet import build_stylesheet, sanitize_css

__all__ = [
    "RegistrySnapshot",
    "build_stylesheet",
    "sanitize_css",
    "serialize_class_list",
]
