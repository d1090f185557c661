"""Markdown renderers and the registry used to select one by name.

The default :class:`MarkdownRenderer` converts page markdown into HTML with
fenced code blocks and tables enabled. Projects can swap in their own renderer
by pointing ``custom_markdown`` at a Python file that registers a renderer
whose name follows the file name (``my_renderer.py`` registers
``MyRenderer``):

.. code-block:: python

    from swatchbook.renderers import MarkdownRenderer, register_renderer


    @register_renderer
    class MyRenderer(MarkdownRenderer):
        extensions = (*MarkdownRenderer.extensions, "toc")

Loading executes the file once and then looks the derived name up in the
registry; nothing is discovered by scanning module globals.
"""

from __future__ import annotations

import collections.abc as cabc
import importlib.util
import logging
import re
import typing as typ
from pathlib import Path

from markdown import Markdown

logger = logging.getLogger(__name__)

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
RENDERER_SUFFIX = ".py"


class RendererLoadError(RuntimeError):
    """Raised when a custom markdown renderer cannot be loaded."""


class Renderer(typ.Protocol):
    """Anything able to turn markdown text into HTML."""

    def render(self, text: str) -> str:
        """Return ``text`` converted to HTML."""
        ...


RendererFactory = cabc.Callable[[], Renderer]

_REGISTRY: dict[str, RendererFactory] = {}


def register_renderer(
    factory: RendererFactory | None = None, /, *, name: str | None = None
) -> typ.Any:
    """Register a renderer factory under ``name`` (defaults to its ``__name__``).

    Usable bare (``@register_renderer``) or with an explicit name
    (``@register_renderer(name="Fancy")``). Registering a name twice replaces
    the earlier entry, so re-running a build reloads edited renderers.
    """

    def _register(target: RendererFactory) -> RendererFactory:
        key = name or target.__name__
        _REGISTRY[key] = target
        return target

    if factory is not None:
        return _register(factory)
    return _register


@register_renderer
class MarkdownRenderer:
    """Render markdown into HTML with fenced code blocks and tables."""

    extensions: typ.ClassVar[tuple[str, ...]] = (
        "fenced_code",
        "tables",
        "sane_lists",
    )

    def __init__(self) -> None:
        self._md = Markdown(extensions=list(self.extensions))

    def render(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        self._md.reset()
        return self._md.convert(normalized)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            return f"{fence}{language or ''}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


def registered_renderers() -> dict[str, RendererFactory]:
    """Return a snapshot of the renderer registry."""
    return dict(_REGISTRY)


def renderer_name_for(path: Path) -> str:
    """Return the registry key implied by a renderer file name.

    Examples
    --------
    >>> from pathlib import Path
    >>> renderer_name_for(Path("lib/my_renderer.py"))
    'MyRenderer'
    """
    return "".join(segment.capitalize() for segment in path.stem.split("_"))


def load_renderer(custom_markdown: Path | None = None) -> RendererFactory:
    """Return the renderer factory for an optional custom renderer file.

    Parameters
    ----------
    custom_markdown : Path, optional
        Python source file that registers a renderer. When ``None`` the
        default :class:`MarkdownRenderer` is returned.

    Returns
    -------
    RendererFactory
        Zero-argument callable producing a renderer.

    Raises
    ------
    RendererLoadError
        If the file is missing, is not a Python source file, fails to import,
        or does not register the name derived from its file name.
    """
    if custom_markdown is None:
        return MarkdownRenderer
    expected = renderer_name_for(custom_markdown)
    # Only a registration made by this file counts.
    previous = _REGISTRY.pop(expected, None)
    try:
        _exec_renderer_source(custom_markdown)
    except RendererLoadError:
        _restore(expected, previous)
        raise
    factory = _REGISTRY.get(expected)
    if factory is None:
        _restore(expected, previous)
        msg = f"Class {expected} not found in {custom_markdown}."
        raise RendererLoadError(msg)
    logger.info("Custom markdown renderer %s loaded.", expected)
    return factory


def _exec_renderer_source(path: Path) -> None:
    """Execute the renderer file so its registrations take effect."""
    msg = f"Could not load {path}."
    if path.suffix != RENDERER_SUFFIX or not path.is_file():
        raise RendererLoadError(msg)
    spec = importlib.util.spec_from_file_location(
        f"swatchbook_custom_renderer_{path.stem}", path
    )
    if spec is None or spec.loader is None:
        raise RendererLoadError(msg)
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise RendererLoadError(msg) from exc


def _restore(name: str, factory: RendererFactory | None) -> None:
    _REGISTRY.pop(name, None)
    if factory is not None:
        _REGISTRY[name] = factory


__all__ = [
    "MarkdownRenderer",
    "Renderer",
    "RendererFactory",
    "RendererLoadError",
    "load_renderer",
    "register_renderer",
    "registered_renderers",
    "renderer_name_for",
]
