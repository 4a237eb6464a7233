"""
Tests for rendering: class lists, stylesheets and snapshots.
"""

from chuk_mcp_modifiers.registry import ModifierRegistry
from chuk_mcp_modifiers.rendering import (
    RegistrySnapshot,
    build_stylesheet,
    sanitize_css,
    serialize_class_list,
)


class TestSerializeClassList:
    """Tests for serialize_class_list."""

    def test_empty(self):
        assert serialize_class_list("", []) == ""
        assert serialize_class_list(None, []) == ""

    def test_existing_only(self):
        assert serialize_class_list("a b", []) == "a b"

    def test_selection_only(self):
        assert serialize_class_list("", ["bsm-fade-in", "x"]) == "bsm-fade-in x"

    def test_existing_first(self):
        """Existing tokens precede the selection, order preserved."""
        assert serialize_class_list("wp-block-group", ["b", "a"]) == "wp-block-group b a"

    def test_no_stray_spaces(self):
        """Extra whitespace in the existing attribute is normalized."""
        assert serialize_class_list("  a   b ", ["c"]) == "a b c"

    def test_token_list(self):
        assert serialize_class_list(["a", "", "b"], ["c"]) == "a b c"

    def test_no_deduplication(self):
        """Overlap between sources is kept."""
        assert serialize_class_list("a", ["a"]) == "a a"


class TestSanitizeCss:
    """Tests for sanitize_css."""

    def test_trims(self):
        assert sanitize_css("\n  .a { color: red; }\n ") == ".a { color: red; }"

    def test_strips_tags(self):
        """Other markup is unwrapped, its text is kept."""
        assert sanitize_css("<b>.a{}</b>") == ".a{}"

    def test_drops_style_elements(self):
        """Style elements are removed with their content."""
        assert sanitize_css(".a{}<style>.b{}</style>") == ".a{}"
        assert sanitize_css("<STYLE type=\"text/css\">.b{}</style>") == ""

    def test_drops_scripts(self):
        assert sanitize_css(".a{}<script>alert(1)</script>") == ".a{}"

    def test_empty(self):
        assert sanitize_css("") == ""
        assert sanitize_css(None) == ""

    def test_leaves_css_untouched(self):
        """Selectors and declarations are not rewritten."""
        css = ".a > .b::after { content: '*'; }"
        assert sanitize_css(css) == css


class TestBuildStylesheet:
    """Tests for build_stylesheet."""

    def test_collects_registry_styles(self, registry: ModifierRegistry):
        registry.register_modifier("core/image", {"name": "a", "class": "a", "inline_style": ".a{}"})
        registry.register_modifier("core/cover", {"name": "b", "class": "b", "inline_style": ".b{}"})
        assert build_stylesheet(registry) == ".a{}\n.b{}"


class TestRegistrySnapshot:
    """Tests for RegistrySnapshot."""

    def test_from_registry(self, animation_registry: ModifierRegistry):
        animation_registry.register_modifier(
            "*", {"name": "outline", "class": "debug-outline", "inline_style": ".debug-outline{}"}
        )
        snapshot = RegistrySnapshot.from_registry(animation_registry)

        assert snapshot.categories["animations"]["exclusive"] is True
        assert set(snapshot.modifiers) == {"core/group", "*"}
        assert snapshot.modifiers["*"]["outline"]["class"] == "debug-outline"
        assert snapshot.stylesheet == ".debug-outline{}"

    def test_snapshot_is_detached(self, animation_registry: ModifierRegistry):
        """Later registry changes need a fresh snapshot."""
        snapshot = RegistrySnapshot.from_registry(animation_registry)
        animation_registry.register_modifier("core/image", {"name": "x", "class": "x"})
        assert "core/image" not in snapshot.modifiers

    def test_to_dict(self, animation_registry: ModifierRegistry):
        data = RegistrySnapshot.from_registry(animation_registry).to_dict()
        assert data["schema"] == "snapshot/v1"
        assert set(data) == {"schema", "categories", "modifiers", "stylesheet"}
