"""
Option stores - opaque key-value persistence for settings and custom definitions.

The registry never talks to a store directly; the loader and the
management surface do.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class OptionStore(ABC):
    """Get/set key-value store contract."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a value, or default if the key is not set."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Set a value, replacing any previous one."""


class MemoryOptionStore(OptionStore):
    """In-process store, used for tests and ephemeral servers."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._options: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._options:
            return default
        return copy.deepcopy(self._options[key])

    def set(self, key: str, value: Any) -> None:
        self._options[key] = copy.deepcopy(value)


class YamlOptionStore(OptionStore):
    """
    Store backed by a single YAML file.

    The file is read lazily on first access and rewritten on every set.
    """

    def __init__(self, path: Path):
        """
        Initialize the store.

        Args:
            path: Path of the options file (created on first write)
        """
        self.path = path
        self._cache: dict[str, Any] | None = None

    def get(self, key: str, default: Any = None) -> Any:
        options = self._load()
        if key not in options:
            return default
        return copy.deepcopy(options[key])

    def set(self, key: str, value: Any) -> None:
        options = self._load()
        options[key] = copy.deepcopy(value)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            yaml.safe_dump(options, f, default_flow_style=False, sort_keys=False)

    def _load(self) -> dict[str, Any]:
        """Load the options file into the cache."""
        if self._cache is not None:
            return self._cache

        self._cache = {}
        if self.path.exists():
            try:
                with open(self.path) as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError):
                logger.exception("Failed to read options file %s", self.path)
                return self._cache

            if isinstance(data, dict):
                self._cache = data
            elif data is not None:
                logger.warning("Ignoring malformed options file: %s", self.path)

        return self._cache
