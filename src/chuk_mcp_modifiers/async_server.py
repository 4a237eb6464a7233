#!/usr/bin/env python3
"""
Async Modifiers MCP Server using chuk-mcp-server

This server exposes a registry of block style modifiers: additive CSS
classes (animations, hover effects, text effects) that editors attach to
content blocks, grouped into exclusive or non-exclusive categories.

The server provides tools for:
- Managing custom categories and modifiers
- Toggling the built-in modifier library
- Resolving the modifiers available to a block type
- Toggling, reordering and clearing a block's selection
- Rendering class attributes, the stylesheet and registry snapshots
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_modifiers.loader import DEFAULT_LIBRARY_PATH, DefinitionLoader
from chuk_mcp_modifiers.management import DefinitionManager
from chuk_mcp_modifiers.registry import CategoryStore, ModifierRegistry
from chuk_mcp_modifiers.storage import YamlOptionStore
from chuk_mcp_modifiers.tools import (
    register_category_tools,
    register_editor_tools,
    register_modifier_tools,
    register_settings_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

OPTIONS_FILE = Path("modifiers") / "options.yaml"


def create_server(
    base_path: Path | None = None,
    library_path: Path | None = None,
) -> ChukMCPServer:
    """
    Build the registry, load definitions and register all tools.

    Args:
        base_path: Data directory (defaults to the current directory)
        library_path: Default definition library (defaults to the bundled one)

    Returns:
        The configured MCP server
    """
    base_path = base_path or Path.cwd()
    options_path = base_path / OPTIONS_FILE
    library_path = library_path or DEFAULT_LIBRARY_PATH

    mcp = ChukMCPServer("chuk-mcp-modifiers")

    registry = ModifierRegistry(CategoryStore())
    loader = DefinitionLoader(registry, YamlOptionStore(options_path), library_path)
    loader.load()
    manager = DefinitionManager(loader)

    register_category_tools(mcp, manager)
    register_modifier_tools(mcp, manager)
    register_settings_tools(mcp, manager)
    register_editor_tools(mcp, registry)

    logger.info("CHUK Modifiers MCP Server initialized")
    logger.info(f"  Library path: {library_path}")
    logger.info(f"  Options file: {options_path}")
    logger.info(f"  Categories: {len(registry.categories)}, modifiers: {len(registry)}")

    return mcp
