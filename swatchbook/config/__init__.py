"""Load and validate the YAML configuration for swatchbook builds.

This subpackage parses the project's ``swatchbook_config.yml`` file into a
frozen :class:`Configuration`, anchors every relative path at the directory
holding the config file, resolves the markdown renderer, and reports missing
or unreadable settings through :func:`validate_config`.

Examples
--------
>>> from pathlib import Path
>>> from swatchbook.config import load_config, validate_config
>>> config = load_config(Path("swatchbook_config.yml"))  # doctest: +SKIP
>>> validate_config(config)  # doctest: +SKIP
()
"""

from .loader import CONFIG_ERROR_MESSAGE, load_config
from .models import ConfigSyntaxError, Configuration, ResolvedPaths
from .validation import resolve_paths, validate_config

__all__ = [
    "CONFIG_ERROR_MESSAGE",
    "ConfigSyntaxError",
    "Configuration",
    "ResolvedPaths",
    "load_config",
    "resolve_paths",
    "validate_config",
]
