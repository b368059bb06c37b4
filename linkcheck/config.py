"""Centralised settings for linkcheck.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported), and per run through
:meth:`Settings.with_overrides` (used by the CLI options).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

MARKDOWN_EXT = ".md"
INDEX_FILENAME = "_index.md"


def _env_list(name: str, default: str) -> List[str]:
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_bool(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    return int(raw) if raw else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Site layout
    # ------------------------------------------------------------------
    root: Path = field(
        default_factory=lambda: Path(os.environ.get("LINKCHECK_ROOT", "."))
    )
    site_dir: str = field(
        default_factory=lambda: os.environ.get("LINKCHECK_SITE_DIR", "")
    )
    content_dir: str = field(
        default_factory=lambda: os.environ.get("LINKCHECK_CONTENT_DIR", "content")
    )
    languages: List[str] = field(
        default_factory=lambda: _env_list("LINKCHECK_LANGUAGES", "en")
    )

    # ------------------------------------------------------------------
    # Run behaviour
    # ------------------------------------------------------------------
    verbose: bool = field(default_factory=lambda: _env_bool("LINKCHECK_VERBOSE"))
    max_workers: Optional[int] = field(
        default_factory=lambda: _env_optional_int("LINKCHECK_MAX_WORKERS")
    )

    @property
    def root_dir(self) -> str:
        """Absolute, normalised root directory the walk starts from."""
        return os.path.abspath(str(self.root))

    @property
    def site_root(self) -> str:
        """Absolute path of the Hugo website folder."""
        return os.path.normpath(os.path.join(self.root_dir, self.site_dir))

    @property
    def content_root(self) -> str:
        """Absolute path of the localized content folder."""
        return os.path.join(self.site_root, self.content_dir)

    def language_root(self, language: str) -> str:
        """Absolute path of the content folder for *language*."""
        return os.path.join(self.content_root, language)

    def display_path(self, path: str) -> str:
        """Return *path* relative to the root, with a leading ``/``."""
        rel = os.path.relpath(path, self.root_dir)
        if rel == "." or rel.startswith(".."):
            return path
        return "/" + rel.replace(os.sep, "/")

    def with_overrides(self, **overrides) -> Settings:
        """Return a copy with every non-``None`` override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)


# Module-level singleton; import this everywhere:
#   from linkcheck.config import settings
settings = Settings()
