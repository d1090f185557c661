"""Resolve configured directories and collect validation failures.

Validation never stops at the first problem: every check runs and contributes
at most one human-readable message. Callers decide whether to surface the
whole tuple or only its first entry.

Examples
--------
>>> from pathlib import Path
>>> from swatchbook.config import Configuration, validate_config
>>> from swatchbook.renderers import MarkdownRenderer
>>> config = Configuration(
...     source=None,
...     destination="build",
...     documentation_assets="doc_assets",
...     base_path=Path("/tmp"),
...     renderer=MarkdownRenderer,
... )
>>> validate_config(config)
('No source directory specified in the config file',)
"""

from __future__ import annotations

import os
import typing as typ

from .models import Configuration, ResolvedPaths

if typ.TYPE_CHECKING:
    from pathlib import Path


def resolve_paths(config: Configuration) -> ResolvedPaths:
    """Return canonical forms of the configured directories that exist."""
    return ResolvedPaths(
        source=_real_dir(config, config.source),
        destination=_real_dir(config, config.destination),
        documentation_assets=_real_dir(config, config.documentation_assets),
    )


def validate_config(
    config: Configuration, paths: ResolvedPaths | None = None
) -> tuple[str, ...]:
    """Return every validation failure for ``config`` in a stable order.

    Parameters
    ----------
    config : Configuration
        Loaded configuration to check.
    paths : ResolvedPaths, optional
        Previously resolved directories; resolved afresh when omitted.

    Returns
    -------
    tuple[str, ...]
        Messages for missing required fields and an unreadable source
        directory. An empty tuple means the configuration is usable.
    """
    resolved = paths or resolve_paths(config)
    errors: list[str] = []
    if not config.source:
        errors.append("No source directory specified in the config file")
    if not config.destination:
        errors.append("No destination directory specified in the config file")
    if not config.documentation_assets:
        errors.append("No documentation assets directory specified")
    if config.source and not _is_readable(resolved.source):
        errors.append(
            f"Cannot read source directory ({config.source}), does it exist?"
        )
    return tuple(errors)


def _real_dir(config: Configuration, value: str | None) -> Path | None:
    """Return the resolved directory for ``value`` or None when absent."""
    if not value:
        return None
    candidate = config.resolve(value)
    if not candidate.is_dir():
        return None
    return candidate.resolve()


def _is_readable(path: Path | None) -> bool:
    return path is not None and os.access(path, os.R_OK | os.X_OK)


__all__ = ["resolve_paths", "validate_config"]
