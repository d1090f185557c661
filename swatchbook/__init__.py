"""Build browsable style guides from documentation comments.

This package scans annotated stylesheets for ``/*doc ... */`` comments,
renders each category into an HTML page wrapped by user-supplied header and
footer templates, and copies static assets next to the generated pages.

Exports
-------
- ``app``: Cyclopts application behind the ``swatchbook`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``DocBuilder``: Programmatic entry point for a full build.

Examples
--------
>>> from pathlib import Path
>>> from swatchbook import DocBuilder
>>> DocBuilder.from_yaml(Path("swatchbook_config.yml")).build()  # doctest: +SKIP
True
"""

from __future__ import annotations

from .builder import DocBuilder
from .cli import app, main

__all__ = ["DocBuilder", "app", "main"]
