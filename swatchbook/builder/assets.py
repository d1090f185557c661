"""Copy dependency directories and documentation assets into the output.

Both copies overwrite: an existing destination entry with the same name is
removed before the new tree is copied in. Failures never stop the build; each
one is logged as a warning and returned as a :class:`CopyFailure`.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import shutil
import typing as typ
from pathlib import Path

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class CopyFailure:
    """A dependency or asset entry that could not be copied."""

    path: str
    reason: str


def is_excluded(name: str) -> bool:
    """Return True for hidden entries and underscore-prefixed partials.

    Examples
    --------
    >>> [is_excluded(n) for n in ("_header.html", ".DS_Store", "styles")]
    [True, True, False]
    """
    return name.startswith(("_", "."))


def replace_entry(source: Path, target: Path) -> None:
    """Copy ``source`` to ``target`` after removing whatever ``target`` holds."""
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    elif target.exists() or target.is_symlink():
        target.unlink()
    if source.is_dir():
        shutil.copytree(source, target, symlinks=True)
    else:
        shutil.copy2(source, target)


def copy_dependencies(
    dependencies: cabc.Iterable[str], *, base_path: Path, output_dir: Path
) -> list[CopyFailure]:
    """Copy each dependency directory into ``output_dir`` under its base name.

    Parameters
    ----------
    dependencies : Iterable[str]
        Configured dependency paths, relative to ``base_path`` unless absolute.
    base_path : Path
        Directory the relative paths are anchored at.
    output_dir : Path
        Destination root.

    Returns
    -------
    list[CopyFailure]
        One entry per dependency that could not be resolved or copied. Paths
        that exist but are not directories are skipped without a failure.
    """
    failures: list[CopyFailure] = []
    for dependency in dependencies:
        try:
            resolved = (base_path / Path(dependency).expanduser()).resolve(
                strict=True
            )
            if not resolved.is_dir():
                continue
            replace_entry(resolved, output_dir / resolved.name)
        except OSError as exc:
            logger.warning("Could not copy dependency: %s", dependency)
            failures.append(CopyFailure(path=dependency, reason=str(exc)))
    return failures


def copy_documentation_assets(
    assets_dir: Path | None, output_dir: Path
) -> list[CopyFailure]:
    """Copy the top-level entries of ``assets_dir`` into ``output_dir``.

    Hidden entries and entries starting with an underscore (templates and
    partials) stay behind. Nothing is copied when ``assets_dir`` is ``None``.
    """
    if assets_dir is None:
        return []
    failures: list[CopyFailure] = []
    for entry in sorted(assets_dir.iterdir()):
        if is_excluded(entry.name):
            continue
        try:
            replace_entry(entry, output_dir / entry.name)
        except OSError as exc:
            logger.warning("Could not copy documentation asset: %s", entry)
            failures.append(CopyFailure(path=str(entry), reason=str(exc)))
    return failures


__all__ = [
    "CopyFailure",
    "copy_dependencies",
    "copy_documentation_assets",
    "is_excluded",
    "replace_entry",
]
