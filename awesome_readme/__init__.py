"""Generate the awesome-list README from the module catalog.

This package exposes the CLI entry points used by ``uv run awesome-readme``
to turn ``modules.yml`` and ``companies.yml`` into a Markdown README.

Exports
-------
- ``app``: Cyclopts application behind the console script.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from awesome_readme import main
>>> main([])  # doctest: +SKIP
wrote README.generated.md
>>> from awesome_readme import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
