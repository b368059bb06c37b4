"""Cross-checks resolved links against the files on disk and the registry."""

from __future__ import annotations

import os
from dataclasses import replace
from typing import List, Optional

from linkcheck.config import Settings, settings as default_settings
from linkcheck.pages.models import ANCHOR_SEPARATOR, Link, Page
from linkcheck.registry import PageRegistry


def validate_link(link: Link, registry: PageRegistry, settings: Settings) -> Link:
    """Return *link*, or a copy of it carrying the validation error."""
    if link.error is not None or link.is_external:
        return link

    path = link.target_path
    shown = settings.display_path(path)
    if not os.path.isfile(path):
        return replace(link, error=f"the link resolves to {shown} which does not exist")

    target = registry.get(path)
    if target is None:
        return replace(link, error=f"{shown} has not been processed by linkcheck")

    if link.fragment and link.fragment not in target.anchors:
        return replace(
            link,
            error=f"{ANCHOR_SEPARATOR}{link.fragment} does not exist in {shown}",
        )
    return link


def validate_page(
    page: Page,
    registry: PageRegistry,
    settings: Optional[Settings] = None,
) -> List[Link]:
    """Return the validated link list for *page*.

    *page* itself is left untouched; the caller writes the result back
    through :meth:`PageRegistry.set_links`.  Pages with a fatal error keep
    their links as they are.
    """
    settings = settings or default_settings
    if page.error is not None:
        return list(page.links)
    return [validate_link(link, registry, settings) for link in page.links]
