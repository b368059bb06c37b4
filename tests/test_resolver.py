"""Tests for link resolution.

Resolution only touches the filesystem to tell folders from pages, so most
cases run against an empty ``tmp_path`` root; the folder cases create the
folder they link to.
"""

from __future__ import annotations

import os

import pytest

from linkcheck.config import Settings
from linkcheck.pages.locator import classify_page
from linkcheck.pages.models import Link
from linkcheck.pages.resolver import (
    LinkError,
    check_file_style,
    check_shortcode,
    parse_scheme,
    resolve_link,
    split_fragment,
)


@pytest.fixture
def site_settings(tmp_path) -> Settings:
    return Settings(root=tmp_path, site_dir="hugo", content_dir="content", languages=["en"])


def _en(settings: Settings, *parts: str) -> str:
    return os.path.join(settings.language_root("en"), *parts)


def _resolve(settings: Settings, page_path: str, raw: str) -> Link:
    page = classify_page(page_path, settings)
    return resolve_link(page, raw, 1, settings)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    def test_split_fragment(self) -> None:
        assert split_fragment("page#anchor") == ("page", "anchor")
        assert split_fragment("#anchor") == ("", "anchor")
        assert split_fragment("page") == ("page", "")
        assert split_fragment("page#a#b") == ("page", "a#b")

    def test_parse_scheme(self) -> None:
        assert parse_scheme("https://www.google.com") == "https"
        assert parse_scheme("mailto:someone@example.com") == "mailto"
        assert parse_scheme("../folder#anchor") == ""

    def test_parse_scheme_rejects_bad_escape(self) -> None:
        with pytest.raises(LinkError, match='invalid URL escape "%%%"'):
            parse_scheme("$$$%%%???")

    def test_shortcode_other_tags_are_ignored(self) -> None:
        check_shortcode('{{< param "version" >}}')

    def test_index_suggestion_without_folder(self) -> None:
        with pytest.raises(LinkError, match='use "./" instead'):
            check_file_style("_index.md", "")


# ---------------------------------------------------------------------------
# Pages outside the hugo website
# ---------------------------------------------------------------------------

class TestPagesOutsideTheWebsite:
    def test_invalid_url(self, site_settings, tmp_path) -> None:
        link = _resolve(site_settings, str(tmp_path / "test.md"), "$$$%%%???")
        assert link == Link(
            raw="$$$%%%???",
            line=1,
            error='error parsing url: invalid URL escape "%%%"',
        )

    def test_https_url(self, site_settings, tmp_path) -> None:
        link = _resolve(site_settings, str(tmp_path / "test.md"), "https://www.google.com")
        assert link == Link(raw="https://www.google.com", line=1, target="https://www.google.com")
        assert link.is_external

    def test_file_url_requires_scheme(self, site_settings, tmp_path) -> None:
        link = _resolve(site_settings, str(tmp_path / "test.md"), "another-page.md")
        assert link.target is None
        assert link.error == "scheme is required on links outside the hugo website"


# ---------------------------------------------------------------------------
# Pages inside the hugo website
# ---------------------------------------------------------------------------

class TestPagesInsideTheWebsite:
    def test_invalid_url(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "test.md"), "$$$%%%???")
        assert link.error == 'error parsing url: invalid URL escape "%%%"'

    def test_ref_shortcode_is_rejected(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "test.md"), '{{< ref "something" >}}')
        assert link.target is None
        assert link.error == 'ref/refLink shortcodes must not be used, use "something" instead'

    def test_reflink_shortcode_is_rejected(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "test.md"), '{{< refLink "a/b#c" >}}')
        assert link.error == 'ref/refLink shortcodes must not be used, use "a/b#c" instead'

    def test_index_md_is_rejected(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "test.md"), "something/_index.md")
        assert link.error == 'links must not end with _index.md, use "something/" instead'

    def test_index_md_with_anchor_is_rejected(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "test.md"), "something/_index.md#anchor")
        assert link.error == 'links must not end with _index.md, use "something/#anchor" instead'

    def test_extension_is_rejected(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "test.md"), "page.md")
        assert link.target is None
        assert link.error == 'links must not have extension .md, use "page" instead'

    def test_extension_with_anchor_is_rejected(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "test.md"), "../other/page.md#setup")
        assert "must not have extension" in link.error
        assert '"../other/page#setup"' in link.error

    def test_https_url(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "test.md"), "https://www.google.com")
        assert link.target == "https://www.google.com"
        assert link.error is None

    def test_relative_path(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "folder", "test.md"), "another-page")
        assert link == Link(
            raw="another-page",
            line=1,
            target=_en(site_settings, "folder", "another-page.md"),
        )

    def test_anchor_on_current_page_with_path(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "folder", "test.md"), "test#anchor")
        assert link.target == _en(site_settings, "folder", "test.md") + "#anchor"
        assert link.target_path == _en(site_settings, "folder", "test.md")
        assert link.fragment == "anchor"

    def test_anchor_on_current_page_without_path(self, site_settings) -> None:
        page_path = _en(site_settings, "folder", "test.md")
        link = _resolve(site_settings, page_path, "#anchor")
        assert link.target == page_path + "#anchor"

    def test_anchor_on_current_index_page(self, site_settings) -> None:
        page_path = _en(site_settings, "folder", "_index.md")
        link = _resolve(site_settings, page_path, "#anchor")
        assert link.target == page_path + "#anchor"

    def test_anchor_on_another_page(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "folder", "test.md"), "another#anchor")
        assert link.target == _en(site_settings, "folder", "another.md") + "#anchor"

    def test_absolute_path(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "folder", "test.md"), "/another-page")
        assert link.target == _en(site_settings, "another-page.md")

    def test_parent_path(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "a", "b", "test.md"), "../c/page")
        assert link.target == _en(site_settings, "a", "c", "page.md")

    def test_folder_resolves_to_index(self, site_settings) -> None:
        os.makedirs(_en(site_settings, "folder"))
        link = _resolve(site_settings, _en(site_settings, "test.md"), "/folder")
        assert link.target == _en(site_settings, "folder", "_index.md")

    def test_folder_with_trailing_slash_and_anchor(self, site_settings) -> None:
        os.makedirs(_en(site_settings, "folder"))
        link = _resolve(site_settings, _en(site_settings, "folder", "test.md"), "../folder/#anchor")
        assert link.target == _en(site_settings, "folder", "_index.md") + "#anchor"

    def test_language_field_is_reserved(self, site_settings) -> None:
        link = _resolve(site_settings, _en(site_settings, "test.md"), "another")
        assert link.language == ""
