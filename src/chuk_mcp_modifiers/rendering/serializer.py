"""
Class-list serializer - builds the class attribute for rendered output.
"""

from __future__ import annotations

from collections.abc import Iterable


def serialize_class_list(existing: str | Iterable[str] | None, selection: Iterable[str]) -> str:
    """
    Join existing class tokens and selected modifier classes.

    Existing tokens come first, then the selection in its stored order.
    No de-duplication is applied; empty inputs never produce stray spaces.

    Args:
        existing: Class attribute string or token list from other sources
        selection: Selected modifier classes

    Returns:
        Space-separated class attribute value

    Example:
        >>> serialize_class_list("wp-block-group", ["bsm-fade-in"])
        'wp-block-group bsm-fade-in'
    """
    if existing is None:
        tokens: list[str] = []
    elif isinstance(existing, str):
        tokens = existing.split()
    else:
        tokens = [t for t in existing if t]

    tokens.extend(c for c in selection if c)
    return " ".join(tokens)
