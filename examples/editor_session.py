#!/usr/bin/env python3
"""
Example: An editor session against the modifier registry.

This walks through what the block editor does with a single block:
resolve the modifiers available to it, toggle a few of them, and build
the class attribute and stylesheet used when the page is rendered.

Usage:
    python examples/editor_session.py
"""

from chuk_mcp_modifiers.loader import DefinitionLoader
from chuk_mcp_modifiers.registry import CategoryStore, ModifierRegistry
from chuk_mcp_modifiers.rendering import RegistrySnapshot, build_stylesheet, serialize_class_list
from chuk_mcp_modifiers.resolution import ModifierResolver
from chuk_mcp_modifiers.selection import ModifierSelection
from chuk_mcp_modifiers.storage import MemoryOptionStore


def main() -> None:
    """Demonstrate resolution, selection and rendering."""
    print("CHUK Block Style Modifiers Demo")
    print("=" * 40)
    print()

    registry = ModifierRegistry(CategoryStore())
    DefinitionLoader(registry, MemoryOptionStore()).load()

    # A custom global modifier alongside the built-in library
    registry.register_modifier(
        "*",
        {
            "name": "debug-outline",
            "label": "Debug Outline",
            "class": "bsm-debug-outline",
            "inline_style": ".bsm-debug-outline { outline: 1px dashed red; }",
        },
    )

    resolver = ModifierResolver(registry)
    groups = resolver.resolve_for_block("core/group")

    print("Modifiers for core/group:")
    for slug, group in groups.items():
        mode = "pick one" if group.exclusive else "pick any"
        print(f"  {group.meta.display_label} ({slug}, {mode})")
        for modifier in group.modifiers:
            print(f"    {modifier.class_name}: {modifier.label}")
    print()

    selection = ModifierSelection(groups)

    print("Toggling modifiers:")
    steps = [
        ("bsm-fade-in", "animations"),
        ("bsm-delay-fast", "animation-delay"),
        ("bsm-slide-up", "animations"),
        ("bsm-debug-outline", None),
    ]
    for class_name, category in steps:
        if category is None:
            category = resolver.category_for_class(groups, class_name)
        selection.toggle(class_name, category)
        print(f"  + {class_name:<20} -> {selection.classes}")
    print()

    selection.reorder(len(selection) - 1, 0)
    print(f"After moving the outline first: {selection.classes}")
    print()

    class_attr = serialize_class_list("wp-block-group alignwide", selection)
    print(f'Rendered: <div class="{class_attr}">')
    print()

    print("Stylesheet:")
    print(build_stylesheet(registry))
    print()

    snapshot = RegistrySnapshot.from_registry(registry)
    print(f"Snapshot: {len(snapshot.categories)} categories, {len(snapshot.modifiers)} scopes")


if __name__ == "__main__":
    main()
