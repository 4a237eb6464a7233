"""
Constants for the modifier system.

No magic strings - scope identifiers, storage keys and messages live here.
"""

from typing import Literal

# Scope identifier meaning "every block type"
WILDCARD_SCOPE = "*"

# Synthesized category used for missing or dangling category references
UNCATEGORIZED_SLUG = "uncategorized"
UNCATEGORIZED_LABEL = "Uncategorized"

# Strings accepted as boolean true (case-insensitive)
TRUTHY_STRINGS = frozenset({"true", "1", "yes", "on"})

# Key-value store keys
OPTION_ENABLE_DEFAULTS = "enable_default_modifiers"
OPTION_CUSTOM_CATEGORIES = "custom_categories"
OPTION_CUSTOM_MODIFIERS = "custom_modifiers"

# Schema versions
SchemaVersion = Literal[
    "modifiers/v1",
    "snapshot/v1",
]


class ErrorCodes:
    """Structured error codes returned by the management surface."""

    INVALID_PARAM = "invalid_param"
    CATEGORY_EXISTS = "category_exists"
    CATEGORY_NOT_FOUND = "category_not_found"
    MODIFIER_EXISTS = "modifier_exists"
    MODIFIER_NOT_FOUND = "modifier_not_found"


class ErrorMessages:
    """Standardized error messages."""

    CATEGORY_EXISTS = "A category with slug '{slug}' already exists."
    CATEGORY_NOT_FOUND = "Category '{slug}' not found."
    MODIFIER_EXISTS = "A modifier with name '{name}' already exists."
    MODIFIER_NOT_FOUND = "Modifier '{name}' not found."
    REQUIRED_FIELD = "Field '{field}' is required."
    INVALID_TEXT = "Field '{field}' must be a string."
    INVALID_IDENTIFIER = "Field '{field}' must be non-empty and contain no whitespace."
    INVALID_BLOCKS = "Field 'blocks' must be a block type or a non-empty list of block types."


class SuccessMessages:
    """Standardized success messages."""

    SETTINGS_SAVED = "Settings saved successfully."
    CATEGORY_CREATED = "Category '{slug}' created."
    CATEGORY_UPDATED = "Category '{slug}' updated."
    CATEGORY_DELETED = "Category '{slug}' deleted."
    MODIFIER_CREATED = "Modifier '{name}' created."
    MODIFIER_UPDATED = "Modifier '{name}' updated."
    MODIFIER_DELETED = "Modifier '{name}' deleted."
