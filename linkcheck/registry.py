"""In-memory index of the pages discovered during a run.

Filled concurrently by the discovery tasks, read concurrently by the
validation tasks.  Every access goes through a single lock.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional

from linkcheck.pages.models import Link, Page


class PageRegistry:
    """Thread-safe mapping from absolute path to :class:`Page`."""

    def __init__(self, pages: Iterable[Page] = ()) -> None:
        self._lock = threading.Lock()
        self._pages: Dict[str, Page] = {}
        for page in pages:
            self.add(page)

    def add(self, page: Page) -> bool:
        """Insert *page* unless its path is already known.

        Returns ``True`` if the page was inserted.
        """
        with self._lock:
            if page.path in self._pages:
                return False
            self._pages[page.path] = page
            return True

    def get(self, path: str) -> Optional[Page]:
        with self._lock:
            return self._pages.get(path)

    def set_links(self, path: str, links: List[Link]) -> None:
        """Replace the link list of the page stored at *path*.

        Raises:
            KeyError: if no page is registered at *path*.
        """
        with self._lock:
            self._pages[path].links = list(links)

    def pages(self) -> List[Page]:
        """Snapshot of all pages, sorted by path."""
        with self._lock:
            return [self._pages[path] for path in sorted(self._pages)]

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._pages

    def __len__(self) -> int:
        with self._lock:
            return len(self._pages)
