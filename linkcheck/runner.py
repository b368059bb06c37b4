"""High-level runner for a linkcheck pass.

A run has two phases, each fanned out on a ``ThreadPoolExecutor`` and joined
before the next one starts:

``discover_pages``  — walks the root and reads every markdown file.
``validate_pages``  — checks the links of every page against the registry.

``run_linkcheck`` wires both phases together and returns the final
:class:`~linkcheck.reporter.Report`.
"""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import replace
from pathlib import Path
from typing import Optional

from linkcheck.config import Settings, settings as default_settings
from linkcheck.pages.extractor import extract_anchors, extract_links
from linkcheck.pages.locator import classify_page, iter_markdown_files
from linkcheck.pages.models import Page
from linkcheck.pages.resolver import resolve_link
from linkcheck.registry import PageRegistry
from linkcheck.reporter import Report, build_report
from linkcheck.validator import validate_page


def _log(settings: Settings, message: str) -> None:
    if settings.verbose:
        print(message, file=sys.stderr)


def read_page(path: str, settings: Optional[Settings] = None) -> Page:
    """Classify and parse the markdown file at *path*.

    Read failures are recorded on the page instead of being raised.
    """
    settings = settings or default_settings
    page = classify_page(path, settings)
    if page.error is not None:
        return page

    try:
        content = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        page.error = f"Error reading content: {exc}"
        return page

    page.anchors = extract_anchors(content)
    page.links = [
        resolve_link(page, raw, line, settings) for raw, line in extract_links(content)
    ]
    return page


def discover_pages(settings: Optional[Settings] = None) -> PageRegistry:
    """Read every markdown file under ``settings.root`` into a new registry."""
    settings = settings or default_settings
    registry = PageRegistry()
    root = settings.root_dir
    _log(settings, f"[DISCOVERY] Reading files from {root}")

    with ThreadPoolExecutor(max_workers=settings.max_workers) as pool:
        future_to_path = {}
        for path, walk_error in iter_markdown_files(root):
            if walk_error is not None:
                registry.add(Page(path=path, error=walk_error))
                continue
            future_to_path[pool.submit(read_page, path, settings)] = path

        for future in as_completed(future_to_path):
            path = future_to_path[future]
            try:
                registry.add(future.result())
            except Exception as exc:
                registry.add(Page(path=path, error=f"Error reading content: {exc}"))

    _log(settings, f"[DISCOVERY] {len(registry)} page(s) read.")
    return registry


def validate_pages(registry: PageRegistry, settings: Optional[Settings] = None) -> None:
    """Validate the links of every page in *registry*, in place."""
    settings = settings or default_settings
    pages = registry.pages()

    with ThreadPoolExecutor(max_workers=settings.max_workers) as pool:
        future_to_page = {
            pool.submit(validate_page, page, registry, settings): page
            for page in pages
        }
        for future in as_completed(future_to_page):
            page = future_to_page[future]
            try:
                links = future.result()
            except Exception as exc:
                links = [
                    replace(link, error=link.error or f"Error validating page: {exc}")
                    for link in page.links
                ]
            registry.set_links(page.path, links)

    _log(settings, f"[VALIDATION] {len(pages)} page(s) checked.")


def run_linkcheck(settings: Optional[Settings] = None) -> Report:
    """Discover, validate and report on every page under ``settings.root``."""
    settings = settings or default_settings
    registry = discover_pages(settings)
    validate_pages(registry, settings)
    report = build_report(registry.pages(), verbose=settings.verbose)
    _log(settings, f"[REPORT] {report.problem_count} problem(s) found.")
    return report
