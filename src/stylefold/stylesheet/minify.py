"""Text-level compression helpers: minification and query extraction."""

from __future__ import annotations

import re

__all__ = ["minify_css", "extract_query"]

_MINIFY_STEPS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"/\*[\s\S]*?\*/"), ""),  # comments
    (re.compile(r"\s+"), " "),
    (re.compile(r";\s*"), ";"),
    (re.compile(r":\s+"), ":"),
    (re.compile(r"\s*\{\s*"), "{"),
    (re.compile(r"\s*\}\s*"), "}"),
    (re.compile(r",\s+"), ","),
]

_QUERY_SELECTOR_RE = re.compile(r"[^{]+\{")
_QUERY_PROPERTY_RE = re.compile(r"[a-zA-Z-]+:")
_QUERY_STRIP_RE = re.compile(r"[{}:]")


def minify_css(css: str) -> str:
    """Strip comments and redundant whitespace.

    Not semantics-preserving in every case (e.g. ``a :hover``); it only
    needs to produce a smaller variant to compare against.
    """
    for pattern, replacement in _MINIFY_STEPS:
        css = pattern.sub(replacement, css)
    return css.strip()


def extract_query(css: str) -> str:
    """Return selector prefixes then property names, space-joined."""
    parts = _QUERY_SELECTOR_RE.findall(css) + _QUERY_PROPERTY_RE.findall(css)
    cleaned = (_QUERY_STRIP_RE.sub("", part).strip() for part in parts)
    return " ".join(part for part in cleaned if part)
