"""Anchor and link extraction from raw markdown text.

Only three patterns are recognised: ``#`` headers, inline links
``[text](target)`` and reference definitions ``[id]: target``.  No markdown
parser is involved.
"""

from __future__ import annotations

import re
from typing import List, Set, Tuple

# A header line; the captured text becomes the anchor.
_HEADER_RX = re.compile(r"^[ \t]*#+[ \t]*(.+)$", re.MULTILINE)

# [text](target), not preceded by "!" (image links).
_INLINE_RX = re.compile(r"(?<!!)\[[^\]]+\]\(([^)]+)\)")

# [id]: target, on its own line.
_REFERENCE_RX = re.compile(r"^\[[^\]]+\]:[ \t]+(.+?)[ \t]*$", re.MULTILINE)


def slugify(header: str) -> str:
    """Turn header text into the anchor Hugo generates for it.

    >>> slugify("My Title")
    'my-title'
    """
    slug = header.strip().lower()
    slug = slug.replace(" ", "-")
    return slug.replace("/", "")


def extract_anchors(text: str) -> Set[str]:
    """Return the set of anchors declared by the headers in *text*."""
    return {slugify(m.group(1)) for m in _HEADER_RX.finditer(text)}


def _line_of(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1


def extract_links(text: str) -> List[Tuple[str, int]]:
    """Return ``(raw_link, line)`` pairs in source order.

    A raw link appearing several times on the page is reported once, at its
    first occurrence.
    """
    matches = [(m.start(1), m.group(1)) for m in _INLINE_RX.finditer(text)]
    matches += [(m.start(1), m.group(1)) for m in _REFERENCE_RX.finditer(text)]
    matches.sort()

    seen: set[str] = set()
    links: List[Tuple[str, int]] = []
    for offset, raw in matches:
        if raw not in seen:
            seen.add(raw)
            links.append((raw, _line_of(text, offset)))
    return links
