"""Plain-text report of a linkcheck run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from linkcheck.pages.models import Page


@dataclass
class Report:
    pages: List[Page] = field(default_factory=list)
    verbose: bool = False

    @property
    def link_count(self) -> int:
        return sum(len(p.links) for p in self.pages)

    @property
    def anchor_count(self) -> int:
        return sum(len(p.anchors) for p in self.pages)

    @property
    def problem_count(self) -> int:
        return sum(p.problem_count for p in self.pages)

    @property
    def exit_code(self) -> int:
        """``1`` if any page or link carries a fatal error, else ``0``."""
        return 1 if self.problem_count else 0


def build_report(pages: List[Page], verbose: bool = False) -> Report:
    """Return a :class:`Report` over *pages*, sorted by path."""
    return Report(pages=sorted(pages, key=lambda p: p.path), verbose=verbose)


def _render_page(page: Page, verbose: bool) -> str:
    lines = [f"PAGE: {page.path}"]
    if page.error is not None:
        lines += ["", f" - ERROR: {page.error}", ""]
        return "\n".join(lines) + "\n"

    errors = page.errors
    if errors:
        lines.append(f"      {len(page.links)} links, {len(errors)} errors")
    else:
        lines.append(f"      {len(page.links)} links, no errors")
    lines.append("")

    details = []
    for link in page.links:
        if link.error is not None:
            details.append(f" - ERROR: {link.raw} (line {link.line}): {link.error}")
        elif verbose:
            details.append(f" - OK: {link.raw}")
    if details:
        lines += details + [""]
    return "\n".join(lines) + "\n"


def render_report(report: Report) -> str:
    """Render *report* as text.

    Only pages with problems are listed, unless the report is verbose.
    """
    chunks = ["\n"]
    for page in report.pages:
        if report.verbose or page.problem_count:
            chunks.append(_render_page(page, report.verbose))

    chunks.append(
        f"Total: {len(report.pages)} pages, {report.link_count} links, "
        f"{report.anchor_count} anchors processed\n"
    )
    if report.problem_count:
        chunks.append(f"{report.problem_count} problem(s) detected\n")
    return "".join(chunks)
