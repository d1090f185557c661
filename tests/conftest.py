"""Shared fixtures for swatchbook tests.

The ``site_root`` fixture lays out a small style guide project: annotated
stylesheets under ``components/``, header/footer templates plus static files
under ``doc_assets/``, and a ``vendor/`` directory usable as a dependency.
``write_config`` renders a ``swatchbook_config.yml`` next to it.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path

BUTTONS_SCSS = dedent(
    """
    /*doc
    ---
    title: Buttons
    name: button
    category: Base CSS
    ---
    Use `.btn` for every clickable action.

    ```html
    <button class="btn">Go</button>
    ```
    */
    .btn { color: rebeccapurple; }
    """
).lstrip()

FORMS_CSS = dedent(
    """
    /*doc
    ---
    title: Inputs
    name: input
    category: Forms
    ---
    | State | Class |
    |-------|-------|
    | error | `.is-error` |
    */
    input { border: 1px solid; }
    """
).lstrip()

HEADER_TEMPLATE = (
    "<header>{{ title }}|{{ file_name }}|{{ categories|join(',') }}</header>\n"
)
FOOTER_TEMPLATE = "<footer>{{ blocks|length }} block(s)</footer>\n"

ConfigWriter = typ.Callable[..., "Path"]


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create a minimal style guide project and return its root."""
    root = tmp_path / "site"
    components = root / "components"
    components.mkdir(parents=True)
    (components / "buttons.scss").write_text(BUTTONS_SCSS, encoding="utf-8")
    (components / "forms.css").write_text(FORMS_CSS, encoding="utf-8")

    assets = root / "doc_assets"
    (assets / "styles").mkdir(parents=True)
    (assets / "styles" / "site.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    (assets / "_internal").mkdir()
    (assets / "_internal" / "notes.txt").write_text("private\n", encoding="utf-8")
    (assets / "_header.html").write_text(HEADER_TEMPLATE, encoding="utf-8")
    (assets / "_footer.html").write_text(FOOTER_TEMPLATE, encoding="utf-8")

    vendor = root / "vendor"
    vendor.mkdir()
    (vendor / "lib.js").write_text("console.log('vendor');\n", encoding="utf-8")
    return root


@pytest.fixture
def write_config(site_root: Path) -> ConfigWriter:
    """Return a helper that writes ``swatchbook_config.yml`` into ``site_root``.

    Keyword arguments override the default entries; pass ``None`` to drop an
    entry entirely.
    """

    def _write(**overrides: object) -> Path:
        entries: dict[str, object] = {
            "source": "./components",
            "destination": "./build",
            "documentation_assets": "./doc_assets",
        }
        entries.update(overrides)
        lines: list[str] = []
        for key, value in entries.items():
            if value is None:
                continue
            if isinstance(value, list):
                lines.append(f"{key}:")
                lines.extend(f"  - {item}" for item in value)
            else:
                lines.append(f"{key}: {value}")
        path = site_root / "swatchbook_config.yml"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
