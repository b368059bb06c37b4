"""Pages package — discovery, extraction and link resolution."""

from linkcheck.pages.extractor import extract_anchors, extract_links, slugify
from linkcheck.pages.locator import classify_page, iter_markdown_files
from linkcheck.pages.models import Link, Page
from linkcheck.pages.resolver import LinkError, resolve_link

__all__ = [
    "classify_page",
    "iter_markdown_files",
    "extract_anchors",
    "extract_links",
    "slugify",
    "resolve_link",
    "LinkError",
    "Link",
    "Page",
]
