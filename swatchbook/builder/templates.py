"""Locate and compile the optional header/footer page templates.

Templates live in the documentation assets directory. ``_header.html`` and
``_footer.html`` are preferred; the older ``header.html``/``footer.html``
names are still honoured. Either role may be missing, in which case pages are
written without it and a warning explains what was skipped.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

from swatchbook._constants import LEGACY_TEMPLATE_NAME, TEMPLATE_NAME, TEMPLATE_ROLES

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class PageTemplates:
    """Compiled header and footer templates, either of which may be absent."""

    header: Template | None = None
    footer: Template | None = None


def find_template(assets_dir: Path | None, role: str) -> Path | None:
    """Return the template file for ``role``, preferring the underscored name."""
    if assets_dir is None:
        return None
    for pattern in (TEMPLATE_NAME, LEGACY_TEMPLATE_NAME):
        candidate = assets_dir / pattern.format(role=role)
        if candidate.is_file():
            return candidate
    return None


def resolve_templates(assets_dir: Path | None) -> PageTemplates:
    """Compile the header/footer templates found in ``assets_dir``.

    Parameters
    ----------
    assets_dir : Path or None
        Resolved documentation assets directory, or ``None`` when it does not
        exist.

    Returns
    -------
    PageTemplates
        Templates ready to render with a per-page context.
    """
    env = Environment(
        loader=FileSystemLoader(str(assets_dir)) if assets_dir else None,
        autoescape=select_autoescape(["html", "xml"]),
        keep_trailing_newline=True,
    )
    compiled: dict[str, Template | None] = {}
    for role in TEMPLATE_ROLES:
        path = find_template(assets_dir, role)
        if path is None:
            logger.warning(
                "No %s found in documentation assets. Without this your "
                "css/%s will not be included on the generated pages.",
                TEMPLATE_NAME.format(role=role),
                role,
            )
            compiled[role] = None
            continue
        compiled[role] = env.get_template(path.name)
    return PageTemplates(header=compiled["header"], footer=compiled["footer"])


__all__ = ["PageTemplates", "find_template", "resolve_templates"]
