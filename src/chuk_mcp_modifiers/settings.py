"""
Plugin settings - the single boolean switch for default modifiers.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_modifiers.constants import OPTION_ENABLE_DEFAULTS
from chuk_mcp_modifiers.models.category import coerce_bool
from chuk_mcp_modifiers.storage.store import OptionStore


class PluginSettings(BaseModel):
    """Settings stored alongside custom definitions."""

    enable_default_modifiers: bool = Field(
        default=True,
        description="Register the built-in modifier library at startup",
    )

    @field_validator("enable_default_modifiers", mode="before")
    @classmethod
    def normalize_flag(cls, v: object) -> bool:
        """Stored values may be '1'/'0', ints or booleans."""
        return coerce_bool(v)

    @classmethod
    def load(cls, store: OptionStore) -> PluginSettings:
        """Read settings from a store; a missing flag means enabled."""
        return cls(enable_default_modifiers=store.get(OPTION_ENABLE_DEFAULTS, "1"))

    def save(self, store: OptionStore) -> None:
        """Write settings to a store."""
        store.set(OPTION_ENABLE_DEFAULTS, "1" if self.enable_default_modifiers else "0")
