"""Lenient regex parser for flat stylesheets.

Syntax example:
    .container { width: 100px; height: 100px; }
    #main .item:hover { color: red; }

Nested blocks and at-rules are not supported; the rule matcher is greedy and
non-nested, so such input is skipped or folded into the nearest match.
"""

from __future__ import annotations

import logging
import re

from stylefold.stylesheet.model import Declaration, Selector, Stylesheet

__all__ = ["parse_stylesheet", "calculate_specificity"]

logger = logging.getLogger(__name__)

# Matches a complete rule: selector { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{]+)     # everything before the opening brace
    \{                       # opening brace
    (?P<body>[^}]+)          # declaration block, never empty
    \}                       # closing brace
    """,
    re.VERBOSE,
)

# Attribute selectors are counted whole; their contents are not names.
_ATTRIBUTE_RE = re.compile(r"\[[^\]]*\]")

# Innermost argument list of a functional pseudo-class such as :nth-child(odd).
_ARGUMENT_RE = re.compile(r"\([^()]*\)")

# A name token with its optional marker prefix.
_TOKEN_RE = re.compile(
    r"""
    (?P<marker>::|[#.:])?    # id, class, pseudo-class or pseudo-element marker
    (?<![\w-])               # not the tail of a longer token (e.g. 2n)
    (?P<name>-?[A-Za-z_][\w-]*)
    """,
    re.VERBOSE,
)

_MARKER_WEIGHTS = {
    "#": 100,
    ".": 10,
    ":": 10,
    "::": 1,
    None: 1,
}


def calculate_specificity(selector: str) -> int:
    """Return the weighted specificity score of a raw selector string.

    Arguments of functional pseudo-classes are not scored: only the
    pseudo-class name counts, so ``li:nth-child(odd)`` and ``a:not(.x)``
    both score 11.
    """
    score = 10 * len(_ATTRIBUTE_RE.findall(selector))
    stripped = _strip_arguments(_ATTRIBUTE_RE.sub(" ", selector))
    for match in _TOKEN_RE.finditer(stripped):
        score += _MARKER_WEIGHTS[match.group("marker")]
    return score


def _strip_arguments(text: str) -> str:
    while True:
        text, count = _ARGUMENT_RE.subn(" ", text)
        if not count:
            return text


def _parse_declarations(body: str, selector_index: int) -> list[Declaration]:
    """Split a rule body on ``;`` and each fragment on its first ``:``."""
    declarations: list[Declaration] = []
    for fragment in body.split(";"):
        if not fragment.strip():
            continue
        name, sep, value = fragment.partition(":")
        if not sep:
            continue  # lenient: fragments without a colon are dropped
        declarations.append(
            Declaration(
                name=name.strip(),
                value=value.strip(),
                selector_index=selector_index,
            )
        )
    return declarations


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet text into a :class:`Stylesheet`.

    Never raises on malformed input; text with no recognizable rule block
    yields an empty stylesheet.
    """
    selectors: list[Selector] = []
    declarations: list[Declaration] = []
    for match in _RULE_RE.finditer(source):
        text = match.group("selector").strip()
        index = len(selectors)
        selectors.append(
            Selector(text=text, index=index, specificity=calculate_specificity(text))
        )
        declarations.extend(_parse_declarations(match.group("body"), index))
    logger.debug(
        "Parsed %d selector(s) and %d declaration(s)", len(selectors), len(declarations)
    )
    return Stylesheet(selectors=tuple(selectors), declarations=tuple(declarations))
