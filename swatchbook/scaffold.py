"""Create a starter config file and documentation assets directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ._constants import DEFAULT_CONFIG_NAME

logger = logging.getLogger(__name__)

INIT_TEMPLATE_DIR = Path(__file__).parent / "templates" / "init"


def setup_dir(target: Path, *, template_dir: Path = INIT_TEMPLATE_DIR) -> list[Path]:
    """Copy the starter files into ``target``.

    Parameters
    ----------
    target : Path
        Directory that receives ``swatchbook_config.yml`` and ``doc_assets/``.
    template_dir : Path, optional
        Source of the starter files; defaults to the packaged templates.

    Returns
    -------
    list[Path]
        Created files and directories, or an empty list when an existing
        config file made the command refuse to overwrite anything.
    """
    if (target / DEFAULT_CONFIG_NAME).exists():
        logger.warning(
            "Cowardly refusing to overwrite existing %s", DEFAULT_CONFIG_NAME
        )
        return []
    target.mkdir(parents=True, exist_ok=True)
    created = [
        target / path.relative_to(template_dir)
        for path in sorted(template_dir.rglob("*"))
    ]
    shutil.copytree(template_dir, target, dirs_exist_ok=True)
    return created


__all__ = ["INIT_TEMPLATE_DIR", "setup_dir"]
