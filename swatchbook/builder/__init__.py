"""Build orchestration: templates, page writing, and asset copies."""

from .assets import CopyFailure, copy_dependencies, copy_documentation_assets
from .doc_builder import DocBuilder
from .pages import PageWriter
from .templates import PageTemplates, resolve_templates

__all__ = [
    "CopyFailure",
    "DocBuilder",
    "PageTemplates",
    "PageWriter",
    "copy_dependencies",
    "copy_documentation_assets",
    "resolve_templates",
]
