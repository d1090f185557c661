"""High-level orchestration for style guide builds.

:class:`DocBuilder` validates a :class:`~swatchbook.config.Configuration`,
resolves the header/footer templates, creates the destination, hands the
source tree to a :class:`~swatchbook.parser.DocParser`, writes every page
through :class:`~swatchbook.builder.pages.PageWriter`, and finally copies
dependencies and documentation assets. Only configuration problems abort a
build; everything after validation degrades to warnings.

Example
-------
>>> from pathlib import Path
>>> from swatchbook.builder import DocBuilder
>>> builder = DocBuilder.from_yaml(Path("swatchbook_config.yml"))  # doctest: +SKIP
>>> builder.build()  # doctest: +SKIP
True
>>> builder.written  # doctest: +SKIP
[PosixPath('/site/build/base_css.html'), ...]
"""

from __future__ import annotations

import logging
import typing as typ

from jinja2 import TemplateError

from swatchbook.config import (
    ResolvedPaths,
    load_config,
    resolve_paths,
    validate_config,
)
from swatchbook.parser import CommentParser, page_file_name

from .assets import CopyFailure, copy_dependencies, copy_documentation_assets
from .pages import PageWriter
from .templates import resolve_templates

if typ.TYPE_CHECKING:
    from pathlib import Path

    from swatchbook.config import Configuration
    from swatchbook.parser import DocParser, ParseResult

logger = logging.getLogger(__name__)


class DocBuilder:
    """Build a style guide site from a loaded configuration."""

    def __init__(
        self, config: Configuration, *, parser: DocParser | None = None
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : Configuration
            Loaded configuration; never modified by the builder.
        parser : DocParser, optional
            Source-comment parser; defaults to :class:`CommentParser`.
        """
        self.config = config
        self.parser: DocParser = parser or CommentParser()
        self.paths = ResolvedPaths()
        self.errors: tuple[str, ...] = ()
        self.written: list[Path] = []
        self.copy_failures: list[CopyFailure] = []

    @classmethod
    def from_yaml(
        cls, path: Path, *, parser: DocParser | None = None
    ) -> DocBuilder:
        """Load ``path`` with :func:`~swatchbook.config.load_config` and wrap it."""
        return cls(load_config(path), parser=parser)

    def is_valid(self) -> bool:
        """Re-resolve directories, refresh :attr:`errors`, and report validity."""
        self.paths = resolve_paths(self.config)
        self.errors = validate_config(self.config, self.paths)
        return not self.errors

    def build(self) -> bool:
        """Run a full build into the destination directory.

        Returns
        -------
        bool
            ``False`` when validation fails (the first error is logged) or a
            header/footer template cannot be compiled or evaluated,
            ``True`` once the build has run to completion.
        """
        if not self.is_valid():
            logger.error(self.errors[0])
            return False

        try:
            templates = resolve_templates(self.paths.documentation_assets)
        except TemplateError as exc:
            logger.error("Could not load page template: %s", exc)
            return False
        output_dir = self._ensure_output_dir()
        input_dir = typ.cast("Path", self.paths.source)

        result = self.parser.parse(input_dir, self.config.index)
        self._warn_missing_index(result)
        self._warn_missing_doc_assets()

        writer = PageWriter(self.config.renderer(), templates, output_dir)
        try:
            self.written = writer.write_all(result.pages, result.categories)
        except TemplateError as exc:
            logger.error("Could not render page template: %s", exc)
            return False

        self.copy_failures = [
            *copy_dependencies(
                self.config.dependencies,
                base_path=self.config.base_path,
                output_dir=output_dir,
            ),
            *copy_documentation_assets(self.paths.documentation_assets, output_dir),
        ]
        logger.info("Build completed. (-:")
        return True

    def _ensure_output_dir(self) -> Path:
        """Create the destination (and parents) when missing and return it."""
        output_dir = self.paths.destination
        if output_dir is None:
            target = self.config.resolve(typ.cast("str", self.config.destination))
            target.mkdir(parents=True, exist_ok=True)
            output_dir = target.resolve()
            self.paths = resolve_paths(self.config)
        return output_dir

    def _warn_missing_index(self, result: ParseResult) -> None:
        index = self.config.index
        if index and page_file_name(index) not in result.pages:
            logger.warning(
                "Could not generate index.html, there was no content generated "
                "for the category %s.",
                index,
            )

    def _warn_missing_doc_assets(self) -> None:
        if self.paths.documentation_assets is None:
            logger.warning(
                "Could not find documentation assets at %s",
                self.config.documentation_assets,
            )


__all__ = ["DocBuilder"]
