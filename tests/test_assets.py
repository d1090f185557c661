"""Unit tests for dependency and documentation asset copies."""

from __future__ import annotations

import logging
import typing as typ

import pytest

from swatchbook.builder.assets import (
    copy_dependencies,
    copy_documentation_assets,
    is_excluded,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.mark.parametrize(
    ("name", "excluded"),
    [
        ("_internal", True),
        ("_header.html", True),
        (".DS_Store", True),
        ("styles", False),
        ("logo_small.png", False),
    ],
)
def test_is_excluded(name: str, excluded: bool) -> None:
    assert is_excluded(name) is excluded


def test_assets_copy_skips_underscore_entries(site_root: Path, output_dir: Path) -> None:
    failures = copy_documentation_assets(site_root / "doc_assets", output_dir)

    assert failures == []
    assert not (output_dir / "_internal").exists()
    assert not (output_dir / "_header.html").exists()
    assert (output_dir / "styles" / "site.css").is_file()


def test_assets_copy_overwrites_existing_entry(site_root: Path, output_dir: Path) -> None:
    """A stale ``styles`` directory is replaced rather than merged."""
    stale = output_dir / "styles"
    stale.mkdir()
    (stale / "old.css").write_text("stale\n", encoding="utf-8")
    (stale / "site.css").write_text("stale\n", encoding="utf-8")

    copy_documentation_assets(site_root / "doc_assets", output_dir)

    assert not (stale / "old.css").exists(), "stale files should be removed"
    assert (stale / "site.css").read_text(encoding="utf-8") == "body { margin: 0; }\n"


def test_assets_copy_replaces_file_with_directory(
    site_root: Path, output_dir: Path
) -> None:
    (output_dir / "styles").write_text("not a directory\n", encoding="utf-8")
    copy_documentation_assets(site_root / "doc_assets", output_dir)
    assert (output_dir / "styles").is_dir()


def test_assets_copy_skips_hidden_entries(site_root: Path, output_dir: Path) -> None:
    (site_root / "doc_assets" / ".cache").mkdir()
    copy_documentation_assets(site_root / "doc_assets", output_dir)
    assert not (output_dir / ".cache").exists()


def test_assets_copy_without_assets_dir_is_noop(output_dir: Path) -> None:
    assert copy_documentation_assets(None, output_dir) == []
    assert list(output_dir.iterdir()) == []


def test_dependencies_copy_real_and_warn_on_missing(
    site_root: Path, output_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING)
    failures = copy_dependencies(
        ["./vendor", "./missing"], base_path=site_root, output_dir=output_dir
    )

    assert (output_dir / "vendor" / "lib.js").is_file()
    assert [failure.path for failure in failures] == ["./missing"]
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1, f"Expected one warning, got {warnings!r}"
    assert "./missing" in warnings[0].getMessage()


def test_dependencies_skip_plain_files_silently(
    site_root: Path, output_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING)
    (site_root / "README.txt").write_text("hi\n", encoding="utf-8")

    failures = copy_dependencies(
        ["README.txt"], base_path=site_root, output_dir=output_dir
    )

    assert failures == []
    assert caplog.records == []
    assert not (output_dir / "README.txt").exists()


def test_dependencies_replace_previous_copy(site_root: Path, output_dir: Path) -> None:
    previous = output_dir / "vendor"
    previous.mkdir()
    (previous / "old.js").write_text("old\n", encoding="utf-8")

    copy_dependencies(["vendor"], base_path=site_root, output_dir=output_dir)

    assert not (previous / "old.js").exists()
    assert (previous / "lib.js").is_file()


def test_dependencies_accept_absolute_paths(site_root: Path, output_dir: Path) -> None:
    copy_dependencies(
        [str(site_root / "vendor")], base_path=site_root / "elsewhere", output_dir=output_dir
    )
    assert (output_dir / "vendor" / "lib.js").is_file()
