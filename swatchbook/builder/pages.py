"""Write each parsed page as header + rendered markdown + footer."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from swatchbook.parser import Page
    from swatchbook.renderers import Renderer

    from .templates import PageTemplates


def page_title(page: Page) -> str:
    """Return the category of the page's first block, or an empty string."""
    if not page.blocks:
        return ""
    return page.blocks[0].category


def page_context(
    file_name: str, page: Page, categories: cabc.Sequence[str]
) -> dict[str, typ.Any]:
    """Return the variables exposed to header and footer templates."""
    return {
        "title": page_title(page),
        "file_name": file_name,
        "blocks": page.blocks,
        "categories": list(categories),
    }


class PageWriter:
    """Render pages through a markdown renderer and the resolved templates."""

    def __init__(
        self, renderer: Renderer, templates: PageTemplates, output_dir: Path
    ) -> None:
        self.renderer = renderer
        self.templates = templates
        self.output_dir = output_dir

    def write_all(
        self, pages: cabc.Mapping[str, Page], categories: cabc.Sequence[str]
    ) -> list[Path]:
        """Write every page and return the output paths in parse order."""
        return [
            self.write_page(file_name, page, categories)
            for file_name, page in pages.items()
        ]

    def write_page(
        self, file_name: str, page: Page, categories: cabc.Sequence[str]
    ) -> Path:
        """Write a single page to ``output_dir / file_name``.

        The header is evaluated first, then the markdown body is rendered, then
        the footer is evaluated with the same context. The file handle is
        released even when rendering raises.
        """
        context = page_context(file_name, page, categories)
        output_path = self.output_dir / file_name
        with output_path.open("w", encoding="utf-8") as handle:
            if self.templates.header is not None:
                handle.write(self.templates.header.render(**context))
            handle.write(self.renderer.render(page.md))
            if self.templates.footer is not None:
                handle.write(self.templates.footer.render(**context))
        return output_path


__all__ = ["PageWriter", "page_context", "page_title"]
