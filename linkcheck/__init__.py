"""linkcheck: link and anchor checker for localized Hugo websites.

Public API::

    from linkcheck import run_linkcheck
    report = run_linkcheck()
"""

from linkcheck.runner import run_linkcheck

__all__ = ["run_linkcheck"]
