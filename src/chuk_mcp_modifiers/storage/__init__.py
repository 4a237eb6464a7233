"""
Storage - key-value option stores.
"""

from chuk_mcp_modifiers.storage.store import MemoryOptionStore, OptionStore, YamlOptionStore

__all__ = [
    "MemoryOptionStore",
    "OptionStore",
    "YamlOptionStore",
]
