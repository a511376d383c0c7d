"""Generate browsable API documentation from an engine class dump.

This package exposes the CLI entry points used by ``dumpling`` to merge the
JSON API dump with reflection metadata and community content, then render a
single-page reference, a per-class site, or a merged JSON "megadump".

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from dumpling import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
