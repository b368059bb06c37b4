"""Page discovery and classification.

``iter_markdown_files`` walks the root directory sequentially;
``classify_page`` decides whether a file belongs to the localized content
tree and, if so, its language and language-relative path.
"""

from __future__ import annotations

import os
from typing import Iterator, Optional, Tuple

from linkcheck.config import MARKDOWN_EXT, Settings, settings as default_settings
from linkcheck.pages.models import Page


def _under(path: str, directory: str) -> bool:
    return path.startswith(directory.rstrip(os.sep) + os.sep)


def classify_page(path: str, settings: Optional[Settings] = None) -> Page:
    """Return a new :class:`Page` for *path* with its classification filled in.

    Pages inside the content folder that do not live under one of the
    configured language folders get a fatal error.
    """
    settings = settings or default_settings
    page = Page(path=path)

    content_root = settings.content_root
    if not _under(path, content_root):
        return page

    page.is_localized = True
    for language in settings.languages:
        language_root = settings.language_root(language)
        if _under(path, language_root):
            page.language = language
            page.relative_path = os.path.relpath(path, language_root).replace(os.sep, "/")
            return page

    page.error = "hugo page /{} does not belong to one of the known languages: {}".format(
        os.path.relpath(path, content_root).replace(os.sep, "/"),
        ", ".join(settings.languages),
    )
    return page


def iter_markdown_files(root: str) -> Iterator[Tuple[str, Optional[str]]]:
    """Yield ``(path, error)`` for every markdown file below *root*.

    ``error`` is ``None`` for regular files.  Directories that cannot be
    listed are yielded once with a description of the failure so the caller
    can record them instead of silently skipping a subtree.  Directories and
    files are visited in sorted order.
    """
    failures: list[OSError] = []

    def _drain() -> Iterator[Tuple[str, Optional[str]]]:
        while failures:
            exc = failures.pop(0)
            failed = exc.filename or root
            yield failed, f"Error walking path {failed}: {exc.strerror or exc}"

    for dirpath, dirnames, filenames in os.walk(root, onerror=failures.append):
        yield from _drain()
        dirnames.sort()
        for name in sorted(filenames):
            if os.path.splitext(name)[1] == MARKDOWN_EXT:
                yield os.path.join(dirpath, name), None

    yield from _drain()
