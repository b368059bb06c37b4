"""linkcheck CLI — entry-point for checking a Hugo website's links.

Usage:
    python cli/main.py --help

Commands:
    check    → walk the root, validate every link, print the report
    inspect  → show how the links of a single page resolve
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkcheck.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import os
from typing import List, Optional

import typer

from linkcheck.config import Settings, settings
from linkcheck.reporter import render_report
from linkcheck.runner import read_page, run_linkcheck

app = typer.Typer(
    name="linkcheck",
    help="Verify links and anchors in the markdown pages of a Hugo website.",
    no_args_is_help=True,
)

_ROOT_OPTION = typer.Option(None, "--root", help="Root path to walk for markdown files.")
_SITE_DIR_OPTION = typer.Option(
    None, "--site-dir", "--hugo-folder", help="Folder containing the Hugo website, relative to root."
)
_CONTENT_DIR_OPTION = typer.Option(
    None, "--content-dir", help="Content folder inside the Hugo website."
)
_LANGUAGE_OPTION = typer.Option(
    None,
    "--language",
    "--hugo-languages",
    "-l",
    help="Language supported by the Hugo website (repeat or comma separate).",
)
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="List every page and link.")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _build_settings(
    root: Optional[Path],
    site_dir: Optional[str],
    content_dir: Optional[str],
    languages: Optional[List[str]],
    verbose: Optional[bool],
) -> Settings:
    """Apply the command-line options on top of the environment settings."""
    if languages:
        languages = [code.strip() for item in languages for code in item.split(",") if code.strip()]
    run_settings = settings.with_overrides(
        root=root,
        site_dir=site_dir,
        content_dir=content_dir,
        languages=languages or None,
        verbose=verbose,
    )
    if not os.path.isdir(run_settings.root_dir):
        raise typer.BadParameter(f"{run_settings.root_dir} is not a directory", param_hint="--root")
    if not run_settings.languages:
        raise typer.BadParameter("at least one language is required", param_hint="--language")
    return run_settings


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("check")
def check(
    root: Optional[Path] = _ROOT_OPTION,
    site_dir: Optional[str] = _SITE_DIR_OPTION,
    content_dir: Optional[str] = _CONTENT_DIR_OPTION,
    languages: Optional[List[str]] = _LANGUAGE_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Check every link of every markdown page under the root."""
    run_settings = _build_settings(root, site_dir, content_dir, languages, verbose or None)

    report = run_linkcheck(run_settings)
    typer.echo(render_report(report), nl=False)
    if report.exit_code:
        raise typer.Exit(report.exit_code)


@app.command("inspect")
def inspect_page(
    page: Path = typer.Argument(..., help="Markdown page to inspect."),
    root: Optional[Path] = _ROOT_OPTION,
    site_dir: Optional[str] = _SITE_DIR_OPTION,
    content_dir: Optional[str] = _CONTENT_DIR_OPTION,
    languages: Optional[List[str]] = _LANGUAGE_OPTION,
) -> None:
    """Show the classification, anchors and resolved links of PAGE.

    Links are resolved but not validated against the rest of the website.
    """
    run_settings = _build_settings(root, site_dir, content_dir, languages, None)
    path = os.path.abspath(str(page))
    if not os.path.isfile(path):
        typer.echo(f"[inspect] {path} is not a file.")
        raise typer.Exit(code=1)

    p = read_page(path, run_settings)
    typer.echo(f"PAGE: {p.path}")
    if p.error is not None:
        typer.echo(f" - ERROR: {p.error}")
        raise typer.Exit(code=1)

    if p.is_localized:
        typer.echo(f"  language : {p.language}")
        typer.echo(f"  path     : {p.relative_path}")
    else:
        typer.echo("  (outside the hugo website)")
    typer.echo(f"  anchors  : {', '.join(sorted(p.anchors)) or '(none)'}")
    typer.echo(f"  links    : {len(p.links)}")
    for link in p.links:
        if link.error is not None:
            typer.echo(f" - L{link.line} {link.raw} → ERROR: {link.error}")
        else:
            typer.echo(f" - L{link.line} {link.raw} → {link.target}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
