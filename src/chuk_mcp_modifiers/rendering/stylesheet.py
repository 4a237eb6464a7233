"""
Style emission - the aggregate stylesheet built from modifier inline styles.

Stylesheet text is opaque: it is never parsed or minified. The only
processing is sanitize_css, applied when custom definitions are stored.
"""

from __future__ import annotations

import re

from chuk_mcp_modifiers.registry.modifiers import ModifierRegistry

# Script and style elements are dropped with their content, other tags are unwrapped
_RAW_TEXT_ELEMENTS = re.compile(
    r"<(script|style)[^>]*?>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
)
_TAGS = re.compile(r"<[^>]*>")


def sanitize_css(css: str | None) -> str:
    """
    Strip markup tags from stylesheet text and trim surrounding whitespace.

    Args:
        css: Raw stylesheet text as submitted

    Returns:
        Text safe to store as a modifier's inline style
    """
    if not css:
        return ""
    css = _RAW_TEXT_ELEMENTS.sub("", css)
    css = _TAGS.sub("", css)
    return css.strip()


def build_stylesheet(registry: ModifierRegistry) -> str:
    """
    Build the stylesheet blob for every registered modifier.

    Returns:
        Concatenated inline styles in registration order (may be empty)
    """
    return registry.collect_inline_styles()
