"""Load the swatchbook YAML config file into a :class:`Configuration`."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from swatchbook._constants import INIT_COMMAND
from swatchbook.renderers import load_renderer

from .models import ConfigSyntaxError, Configuration

CONFIG_ERROR_MESSAGE = (
    "Could not load config file, check the syntax or try "
    f"'{INIT_COMMAND}' to get started"
)


def load_config(path: Path) -> Configuration:
    """Load the YAML configuration that drives a style guide build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML config file (for example,
        ``swatchbook_config.yml``).

    Returns
    -------
    Configuration
        Parsed configuration whose ``base_path`` is the directory holding the
        config file and whose ``renderer`` is the resolved markdown renderer.

    Raises
    ------
    ConfigSyntaxError
        If the file does not exist, cannot be parsed, or does not contain a
        top-level mapping.
    RendererLoadError
        If ``custom_markdown`` names a renderer that cannot be loaded.

    Examples
    --------
    >>> from pathlib import Path
    >>> from swatchbook.config import load_config
    >>> config = load_config(Path("swatchbook_config.yml"))  # doctest: +SKIP
    >>> config.source  # doctest: +SKIP
    './components'
    """
    raw = _read_mapping(path)
    base_path = path.expanduser().resolve().parent
    custom_markdown = _optional_str(raw.get("custom_markdown"))
    renderer = load_renderer(
        base_path / custom_markdown if custom_markdown else None
    )
    return Configuration(
        source=_optional_str(raw.get("source")),
        destination=_optional_str(raw.get("destination")),
        documentation_assets=_optional_str(raw.get("documentation_assets")),
        dependencies=_as_tuple(raw.get("dependencies")),
        index=_optional_str(raw.get("index")),
        base_path=base_path,
        renderer=renderer,
        custom_markdown=custom_markdown,
    )


def _read_mapping(path: Path) -> dict[str, typ.Any]:
    """Parse ``path`` and return its top-level mapping."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle)
    except (OSError, YAMLError) as exc:
        raise ConfigSyntaxError(CONFIG_ERROR_MESSAGE) from exc
    if not isinstance(loaded, dict):
        raise ConfigSyntaxError(CONFIG_ERROR_MESSAGE)
    return dict(loaded)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_tuple(value: object | None) -> tuple[str, ...]:
    """Normalize the ``dependencies`` entry into a tuple of path strings."""
    match value:
        case None:
            return ()
        case str() | Path():
            return (str(value),)
        case list() | tuple():
            return tuple(str(item) for item in value if item is not None)
        case _:
            msg = (
                "'dependencies' must be a list of directories; check the syntax "
                f"or try '{INIT_COMMAND}' to get started"
            )
            raise ConfigSyntaxError(msg)


__all__ = ["CONFIG_ERROR_MESSAGE", "load_config"]
