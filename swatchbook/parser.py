r"""Extract documentation blocks from annotated source comments.

The builder consumes a parser only through :class:`DocParser`: given an input
directory and an optional index name it returns pages keyed by output file
name plus the categories seen while scanning. :class:`CommentParser` is the
default implementation. It reads ``/*doc ... */`` comments whose body opens
with YAML front matter::

    /*doc
    ---
    title: Buttons
    name: button
    category: Base CSS
    ---
    Use `.btn` for every clickable control.
    */

Markdown files take part too when they start with the same front matter.

Example
-------
>>> from swatchbook.parser import extract_blocks
>>> text = "/*doc\n---\ntitle: Alerts\ncategory: Feedback\n---\nBody\n*/"
>>> [block.title for block in extract_blocks(text)]
['Alerts']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import textwrap
import typing as typ
from html import escape
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

logger = logging.getLogger(__name__)

COMMENT_PATTERN = re.compile(r"/\*doc(.*?)\*/", re.DOTALL)
FRONT_MATTER_PATTERN = re.compile(
    r"\A\s*---[ \t]*\n(.*?)\n---[ \t]*(?:\n|\Z)(.*)\Z", re.DOTALL
)
SOURCE_SUFFIXES = frozenset(
    {".css", ".scss", ".sass", ".less", ".styl", ".js", ".md"}
)
INDEX_FILE_NAME = "index.html"


@dc.dataclass(slots=True)
class Block:
    """One documentation comment.

    Attributes
    ----------
    name : str
        Anchor identifier for the block.
    title : str
        Heading shown above the block's markdown.
    category : str
        Grouping label; decides which page the block lands on.
    markdown : str
        Markdown body following the front matter.
    meta : dict[str, Any]
        Remaining front-matter keys, passed through untouched.
    """

    name: str
    title: str
    category: str
    markdown: str
    meta: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class Page:
    """Blocks that share an output file and their concatenated markdown."""

    blocks: list[Block] = dc.field(default_factory=list)
    md: str = ""


@dc.dataclass(slots=True)
class ParseResult:
    """Pages keyed by output file name and the categories in first-seen order."""

    pages: dict[str, Page]
    categories: list[str]


class DocParser(typ.Protocol):
    """Turn a source tree into pages."""

    def parse(self, input_dir: Path, index: str | None = None) -> ParseResult:
        """Return the pages and categories found under ``input_dir``."""
        ...


def page_file_name(category: str) -> str:
    """Return the output file name for a category.

    Examples
    --------
    >>> page_file_name("Base CSS")
    'base_css.html'
    """
    return category.replace(" ", "_").lower() + ".html"


def _slugify(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug or "block"


def _parse_front_matter(raw: str) -> dict[str, typ.Any] | None:
    loader = YAML(typ="safe")
    try:
        loaded = loader.load(raw)
    except YAMLError:
        return None
    return dict(loaded) if isinstance(loaded, dict) else None


def _build_block(comment: str) -> Block | None:
    """Build a Block from one comment body, or None when it lacks front matter."""
    match = FRONT_MATTER_PATTERN.match(textwrap.dedent(comment).strip("\n"))
    if not match:
        return None
    meta = _parse_front_matter(match.group(1))
    if not meta or not meta.get("category"):
        return None
    category = str(meta.pop("category")).strip()
    title = str(meta.pop("title", "") or meta.get("name") or category).strip()
    name = str(meta.pop("name", "") or _slugify(title)).strip()
    return Block(
        name=name,
        title=title,
        category=category,
        markdown=match.group(2).strip(),
        meta=meta,
    )


def extract_blocks(text: str, *, whole_file: bool = False) -> list[Block]:
    """Return blocks found in ``text`` in source order.

    Parameters
    ----------
    text : str
        Source file contents.
    whole_file : bool, optional
        Treat the entire text as one comment body (used for markdown files).

    Returns
    -------
    list[Block]
        Parsed blocks; comments without usable front matter are skipped.
    """
    if whole_file:
        bodies = [text]
    else:
        bodies = [match.group(1) for match in COMMENT_PATTERN.finditer(text)]
    blocks: list[Block] = []
    for body in bodies:
        block = _build_block(body)
        if block is None:
            if not whole_file:
                logger.warning(
                    "Skipping doc comment without valid front matter: %s",
                    body.strip().splitlines()[0] if body.strip() else "<empty>",
                )
            continue
        blocks.append(block)
    return blocks


def _render_block_markdown(block: Block) -> str:
    heading = f'<h2 id="{escape(block.name, quote=True)}">{escape(block.title)}</h2>'
    return f"{heading}\n\n{block.markdown}\n"


class CommentParser:
    """Scan a source tree for doc comments and group them into pages."""

    def __init__(self, suffixes: typ.Iterable[str] = SOURCE_SUFFIXES) -> None:
        self.suffixes = frozenset(suffixes)

    def parse(self, input_dir: Path, index: str | None = None) -> ParseResult:
        """Return pages keyed by file name plus categories in first-seen order.

        When ``index`` names a category with content, its page is also
        published as ``index.html``.
        """
        pages: dict[str, Page] = {}
        categories: list[str] = []
        for path in self._source_files(input_dir):
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping unreadable source file %s: %s", path, exc)
                continue
            for block in extract_blocks(text, whole_file=path.suffix == ".md"):
                if block.category not in categories:
                    categories.append(block.category)
                page = pages.setdefault(page_file_name(block.category), Page())
                page.blocks.append(block)
                page.md += _render_block_markdown(block)
        if index:
            index_page = pages.get(page_file_name(index))
            if index_page is not None:
                pages[INDEX_FILE_NAME] = index_page
        return ParseResult(pages=pages, categories=categories)

    def _source_files(self, input_dir: Path) -> list[Path]:
        """Return matching files under ``input_dir`` in a stable order."""
        found: list[Path] = []
        for path in sorted(input_dir.rglob("*")):
            relative = path.relative_to(input_dir)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.is_file() and path.suffix in self.suffixes:
                found.append(path)
        return found


__all__ = [
    "Block",
    "CommentParser",
    "DocParser",
    "Page",
    "ParseResult",
    "extract_blocks",
    "page_file_name",
]
