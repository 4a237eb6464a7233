"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_modifiers.registry import CategoryStore, ModifierRegistry

ANIMATIONS = {
    "slug": "animations",
    "label": "Animations",
    "description": "Entrance animations for blocks",
    "exclusive": True,
}


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def registry() -> ModifierRegistry:
    """Empty registry with its own category store."""
    return ModifierRegistry(CategoryStore())


@pytest.fixture
def animation_registry(registry: ModifierRegistry) -> ModifierRegistry:
    """Registry with an exclusive 'animations' category and two modifiers on core/group."""
    registry.register_modifier(
        "core/group",
        {"name": "fade-in", "label": "Fade In", "class": "bsm-fade-in", "category": ANIMATIONS},
    )
    registry.register_modifier(
        "core/group",
        {"name": "slide-up", "label": "Slide Up", "class": "bsm-slide-up", "category": ANIMATIONS},
    )
    return registry
