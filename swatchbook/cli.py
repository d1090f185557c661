"""Cyclopts CLI entrypoint for building swatchbook style guides.

The ``swatchbook`` console script builds a style guide from the config file
named on the command line (``swatchbook_config.yml`` by default) and can
scaffold a starter config with ``swatchbook init``. Messages go through
:mod:`logging`; each generated page is echoed as ``wrote <path>``.

Examples
--------
Build with the default config in the current directory:

>>> from swatchbook.cli import main
>>> main()  # doctest: +SKIP

Build with an explicit config file:

>>> from swatchbook.cli import app
>>> app(["styleguide/config.yml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_NAME, INIT_COMMAND
from .builder import DocBuilder
from .config import ConfigSyntaxError
from .renderers import RendererLoadError
from .scaffold import setup_dir

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_NAME)
MISSING_CONFIG_MESSAGE = (
    f"Could not load config file, try '{INIT_COMMAND}' to get started"
)

logger = logging.getLogger(__name__)

app = App(
    name="swatchbook",
    help="Build a style guide from documentation comments.",
    config=cyclopts.config.Env("SWATCHBOOK_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def build(
    config: typ.Annotated[
        Path, Parameter(help="Path to the swatchbook config file")
    ] = DEFAULT_CONFIG,
) -> None:
    """Build the style guide described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Config file to build from; defaults to ``swatchbook_config.yml`` in
        the working directory.

    Raises
    ------
    SystemExit
        With status 1 when the config cannot be loaded or fails validation.
    """
    if not config.exists():
        logger.error(MISSING_CONFIG_MESSAGE)
        raise SystemExit(1)
    try:
        builder = DocBuilder.from_yaml(config)
    except (ConfigSyntaxError, RendererLoadError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    if not builder.build():
        raise SystemExit(1)
    for path in builder.written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Create a starter config file and documentation assets.")
def init(
    *,
    directory: typ.Annotated[
        Path, Parameter(help="Directory to scaffold into")
    ] = Path(),
) -> None:
    """Scaffold ``swatchbook_config.yml`` and ``doc_assets/`` into ``directory``."""
    for path in setup_dir(directory):
        print(f"created {_format_path(path)}")


def _configure_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def main() -> None:
    """Invoke the Cyclopts application behind the ``swatchbook`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    _configure_logging()
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
