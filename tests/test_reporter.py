"""Tests for the text report."""

from __future__ import annotations

from linkcheck.pages.models import Link, Page
from linkcheck.reporter import build_report, render_report


def _pages():
    return [
        Page(
            path="/site/b.md",
            anchors={"intro", "setup"},
            links=[
                Link(raw="https://example.com", line=1, target="https://example.com"),
                Link(raw="missing", line=4, target="/site/missing.md", error="the link resolves to /missing.md which does not exist"),
            ],
        ),
        Page(path="/site/a.md", anchors={"top"}, links=[Link(raw="b", line=2, target="/site/b.md")]),
        Page(path="/site/c.md", error="Error reading content: boom"),
    ]


class TestBuildReport:
    def test_pages_are_sorted(self) -> None:
        report = build_report(_pages())
        assert [p.path for p in report.pages] == ["/site/a.md", "/site/b.md", "/site/c.md"]

    def test_counts(self) -> None:
        report = build_report(_pages())
        assert report.link_count == 3
        assert report.anchor_count == 3
        assert report.problem_count == 2
        assert report.exit_code == 1

    def test_clean_report_exit_code(self) -> None:
        report = build_report([Page(path="/site/a.md", links=[Link(raw="b", target="/site/b.md")])])
        assert report.problem_count == 0
        assert report.exit_code == 0


class TestRenderReport:
    def test_only_pages_with_problems(self) -> None:
        text = render_report(build_report(_pages()))
        assert text == (
            "\n"
            "PAGE: /site/b.md\n"
            "      2 links, 1 errors\n"
            "\n"
            " - ERROR: missing (line 4): the link resolves to /missing.md which does not exist\n"
            "\n"
            "PAGE: /site/c.md\n"
            "\n"
            " - ERROR: Error reading content: boom\n"
            "\n"
            "Total: 3 pages, 3 links, 3 anchors processed\n"
            "2 problem(s) detected\n"
        )

    def test_verbose_lists_every_page_and_link(self) -> None:
        text = render_report(build_report(_pages(), verbose=True))
        assert "PAGE: /site/a.md\n      1 links, no errors\n\n - OK: b\n" in text
        assert " - OK: https://example.com\n - ERROR: missing (line 4)" in text

    def test_clean_report(self) -> None:
        text = render_report(build_report([Page(path="/site/a.md")]))
        assert text == "\nTotal: 1 pages, 0 links, 0 anchors processed\n"

    def test_rendering_is_deterministic(self) -> None:
        pages = _pages()
        first = render_report(build_report(pages))
        second = render_report(build_report(list(reversed(pages))))
        assert first == second
