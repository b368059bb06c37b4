"""Link resolution: turns a raw link into an external URL or an in-tree target.

Hugo renders ``content/<lang>/folder/page.md`` at ``/folder/page/`` and
``content/<lang>/folder/_index.md`` at ``/folder/``, so on-site links are
written without the ``.md`` extension and index pages are linked through
their folder.  :func:`resolve_link` maps such a link back to the file it
points to.
"""

from __future__ import annotations

import os
import posixpath
import re
from typing import Optional, Tuple
from urllib.parse import urlsplit

from linkcheck.config import INDEX_FILENAME, MARKDOWN_EXT, Settings, settings as default_settings
from linkcheck.pages.models import ANCHOR_SEPARATOR, Link, Page


class LinkError(Exception):
    """Raised when a link cannot be resolved; the message ends up on the link."""


# ---------------------------------------------------------------------------
# Syntax helpers
# ---------------------------------------------------------------------------

# {{< tag "value" >}}, captures both tag and value.
_SHORTCODE_RX = re.compile(r'^\s*\{\{<\s*([\S#]+)\s+"([^\s=]+)"\s*>\}\}\s*$')

_BAD_ESCAPE_RX = re.compile(r"%(?![0-9A-Fa-f]{2}).{0,2}")


def parse_scheme(raw: str) -> str:
    """Return the URL scheme of *raw* (empty for file links).

    Raises:
        LinkError: if *raw* is not a valid URL.
    """
    bad_escape = _BAD_ESCAPE_RX.search(raw)
    if bad_escape:
        raise LinkError(f'error parsing url: invalid URL escape "{bad_escape.group(0)}"')
    try:
        return urlsplit(raw).scheme
    except ValueError as exc:
        raise LinkError(f"error parsing url: {exc}") from exc


def check_shortcode(raw: str) -> None:
    """Reject ``ref``/``refLink`` shortcodes in favour of plain links."""
    match = _SHORTCODE_RX.match(raw)
    if match and match.group(1) in ("ref", "refLink"):
        raise LinkError(
            f'ref/refLink shortcodes must not be used, use "{match.group(2)}" instead'
        )


def split_fragment(raw: str) -> Tuple[str, str]:
    """Split *raw* on the first ``#``; the fragment keeps no leading ``#``."""
    path, sep, fragment = raw.partition(ANCHOR_SEPARATOR)
    return path, fragment if sep else ""


def _with_fragment(path: str, fragment: str) -> str:
    return f"{path}{ANCHOR_SEPARATOR}{fragment}" if fragment else path


def check_file_style(path: str, fragment: str) -> None:
    """Reject links naming ``_index.md`` or carrying the ``.md`` extension."""
    if posixpath.basename(path) == INDEX_FILENAME:
        folder = posixpath.dirname(path) or "."
        raise LinkError(
            f"links must not end with {INDEX_FILENAME}, "
            f'use "{_with_fragment(folder + "/", fragment)}" instead'
        )
    if path.endswith(MARKDOWN_EXT):
        raise LinkError(
            f"links must not have extension {MARKDOWN_EXT}, "
            f'use "{_with_fragment(path[: -len(MARKDOWN_EXT)], fragment)}" instead'
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def target_file(page: Page, path: str, settings: Settings, language: str = "") -> str:
    """Return the absolute file a scheme-less link *path* on *page* points to.

    Relative paths are taken from the page folder, absolute ones from the
    language folder.  A folder resolves to its ``_index.md``, anything else
    gets the ``.md`` extension back.
    """
    if not posixpath.isabs(path):
        page_dir = posixpath.dirname(page.relative_path)
        path = posixpath.join("/", page_dir, path)
    path = posixpath.normpath(path).lstrip("/")

    language_root = settings.language_root(language or page.language)
    target = os.path.normpath(os.path.join(language_root, *path.split("/")))
    if os.path.isdir(target):
        return os.path.join(target, INDEX_FILENAME)
    return target + MARKDOWN_EXT


def resolve_link(
    page: Page,
    raw: str,
    line: int = 0,
    settings: Optional[Settings] = None,
) -> Link:
    """Resolve *raw*, found on *page* at *line*, into a :class:`Link`.

    The returned link has either ``target`` or ``error`` set.
    """
    settings = settings or default_settings
    try:
        check_shortcode(raw)
        scheme = parse_scheme(raw)
        if scheme:
            # External links are kept verbatim; reachability is not checked.
            return Link(raw=raw, line=line, target=raw)
        if not page.is_localized:
            raise LinkError("scheme is required on links outside the hugo website")

        path, fragment = split_fragment(raw)
        if not path:
            # "#anchor" points to the current page.
            return Link(raw=raw, line=line, target=_with_fragment(page.path, fragment))
        check_file_style(path, fragment)

        target = target_file(page, path, settings)
    except LinkError as exc:
        return Link(raw=raw, line=line, error=str(exc))

    return Link(raw=raw, line=line, target=_with_fragment(target, fragment))
