"""Data models for the linkcheck pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set
from urllib.parse import urlsplit

ANCHOR_SEPARATOR = "#"


@dataclass
class Link:
    """One link found on a :class:`Page`.

    After resolution exactly one of ``target`` and ``error`` is set; the
    validator may later add an ``error`` to a link that has a target.
    """

    raw: str
    line: int = 0
    target: Optional[str] = None
    # Reserved for links pointing at another language; nothing fills it yet.
    language: str = ""
    error: Optional[str] = None

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------
    @property
    def is_external(self) -> bool:
        """``True`` when the target carries a URL scheme (http, mailto, ...)."""
        return bool(self.target) and bool(urlsplit(self.target).scheme)

    @property
    def target_path(self) -> str:
        """The target without its ``#fragment``."""
        return (self.target or "").split(ANCHOR_SEPARATOR, 1)[0]

    @property
    def fragment(self) -> str:
        """The target anchor without the leading ``#``, or empty string."""
        parts = (self.target or "").split(ANCHOR_SEPARATOR, 1)
        return parts[1] if len(parts) == 2 else ""


@dataclass
class Page:
    """A markdown file discovered under the root directory."""

    path: str
    is_localized: bool = False
    language: str = ""
    relative_path: str = ""
    anchors: Set[str] = field(default_factory=set)
    links: List[Link] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def errors(self) -> List[Link]:
        """Links on this page carrying a fatal error."""
        return [link for link in self.links if link.error is not None]

    @property
    def problem_count(self) -> int:
        if self.error is not None:
            return 1
        return len(self.errors)
