"""
Definition loader - populates the registry.

Definitions come from:
1. Built-in library (YAML shipped with the package), unless disabled
2. Custom definitions persisted in the option store

Custom entries are replayed after defaults, so they override defaults
sharing the same slug, or the same name within a scope.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_modifiers.constants import OPTION_CUSTOM_CATEGORIES, OPTION_CUSTOM_MODIFIERS
from chuk_mcp_modifiers.registry.modifiers import ModifierRegistry
from chuk_mcp_modifiers.settings import PluginSettings
from chuk_mcp_modifiers.storage.store import OptionStore

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_PATH = Path(__file__).parent / "defaults" / "library"


class DefinitionLoader:
    """
    Loads default and custom definitions into a registry.

    The loader owns the initialization order; call reload() after the
    persisted definitions change.
    """

    def __init__(
        self,
        registry: ModifierRegistry,
        store: OptionStore,
        library_path: Path | None = None,
    ):
        """
        Initialize the loader.

        Args:
            registry: Registry to populate
            store: Option store holding settings and custom definitions
            library_path: Directory of default definition files
        """
        self.registry = registry
        self.store = store
        self.library_path = library_path or DEFAULT_LIBRARY_PATH

    def load(self) -> None:
        """Register defaults (if enabled), then custom definitions."""
        settings = PluginSettings.load(self.store)

        if settings.enable_default_modifiers:
            count = self.load_defaults()
            logger.info("Loaded %d default modifier definitions", count)
        else:
            logger.info("Default modifiers disabled")

        count = self.load_custom()
        logger.info("Loaded %d custom modifier definitions", count)

    def reload(self) -> None:
        """Clear the registry and load everything again."""
        self.registry.clear()
        self.registry.categories.clear()
        self.load()

    def list_library_files(self) -> list[Path]:
        """Default definition files, in load order."""
        if not self.library_path.exists():
            return []
        return sorted(self.library_path.glob("*.yaml"))

    def load_defaults(self) -> int:
        """
        Register every definition in the built-in library.

        Returns:
            Number of modifiers registered
        """
        count = 0
        for path in self.list_library_files():
            data = self._load_library_file(path)
            if data is None:
                continue
            count += self._register_library(data)
        return count

    def load_custom(self) -> int:
        """
        Replay persisted custom categories and modifiers.

        Returns:
            Number of modifiers registered
        """
        for category in self.store.get(OPTION_CUSTOM_CATEGORIES, []) or []:
            if not isinstance(category, dict):
                logger.warning("Skipping malformed custom category: %r", category)
                continue
            self.registry.categories.register_from_dict(category)

        count = 0
        for modifier in self.store.get(OPTION_CUSTOM_MODIFIERS, []) or []:
            if not isinstance(modifier, dict):
                logger.warning("Skipping malformed custom modifier: %r", modifier)
                continue
            if self.registry.register_modifier(modifier.get("blocks"), modifier):
                count += 1
        return count

    def _load_library_file(self, path: Path) -> dict[str, Any] | None:
        """Load a definition file from the library."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            logger.exception("Failed to read definition file %s", path)
            return None

        if not isinstance(data, dict):
            logger.warning("Skipping definition file without a mapping: %s", path)
            return None
        return data

    def _register_library(self, data: dict[str, Any]) -> int:
        """Register the modifiers of one library file."""
        category = data.get("category", "")
        blocks = data.get("blocks")
        count = 0

        for modifier in data.get("modifiers", []) or []:
            if not isinstance(modifier, dict):
                continue
            entry = {"category": category, **modifier}
            if self.registry.register_modifier(modifier.get("blocks", blocks), entry):
                count += 1

        return count
