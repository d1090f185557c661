"""Typed dataclasses describing a swatchbook build configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

if typ.TYPE_CHECKING:
    from swatchbook.renderers import RendererFactory


class ConfigSyntaxError(ValueError):
    """Raised when the config file is missing, unparsable, or not a mapping."""


@dc.dataclass(frozen=True, slots=True)
class Configuration:
    """A loaded build configuration.

    Attributes
    ----------
    source : str or None
        Directory scanned for documentation comments.
    destination : str or None
        Output root for the generated site.
    documentation_assets : str or None
        Directory of static assets plus the header/footer templates.
    dependencies : tuple[str, ...]
        Extra directories copied verbatim into the destination.
    index : str or None
        Category whose page is treated as the site root.
    base_path : Path
        Directory holding the config file; relative paths resolve against it.
    renderer : RendererFactory
        Zero-argument callable producing the markdown renderer.
    custom_markdown : str or None
        Path of the custom renderer source, when one was configured.
    """

    source: str | None
    destination: str | None
    documentation_assets: str | None
    base_path: Path
    renderer: RendererFactory
    dependencies: tuple[str, ...] = ()
    index: str | None = None
    custom_markdown: str | None = None

    def resolve(self, value: str | Path) -> Path:
        """Return ``value`` anchored at :attr:`base_path` unless already absolute."""
        return self.base_path / Path(value).expanduser()


@dc.dataclass(frozen=True, slots=True)
class ResolvedPaths:
    """Canonical directories derived from a configuration.

    Each attribute is ``None`` when the configured directory is unset or does
    not exist at resolution time.
    """

    source: Path | None = None
    destination: Path | None = None
    documentation_assets: Path | None = None


__all__ = ["ConfigSyntaxError", "Configuration", "ResolvedPaths"]
