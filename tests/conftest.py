"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from category_harvest.models.model_package import PackageRecord

TemplateWriter = Callable[..., Path]


def _template_text(
    pkgname: str | None,
    short_desc: str | None = None,
    homepage: str | None = None,
    depends: str | None = None,
    extra: str = "",
) -> str:
    lines = ["# Template file", ""]
    if pkgname is not None:
        lines.append(f"pkgname={pkgname}")
    lines.append("version=1.0")
    lines.append("revision=1")
    if depends is not None:
        lines.append(f'depends="{depends}"')
    if short_desc is not None:
        lines.append(f'short_desc="{short_desc}"')
    lines.append('maintainer="Jane Doe <jane@example.org>"')
    if homepage is not None:
        lines.append(f'homepage="{homepage}"')
    if extra:
        lines.append(extra)
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_template(tmp_path: Path) -> TemplateWriter:
    """Write a template into <tmp_path>/srcpkgs/<directory>/template."""
    tree = tmp_path / "srcpkgs"

    def _write(directory: str, pkgname: str | None = None, **fields: str) -> Path:
        pkg_dir = tree / directory
        pkg_dir.mkdir(parents=True, exist_ok=True)
        path = pkg_dir / "template"
        name = directory.rsplit("/", 1)[-1] if pkgname is None else pkgname
        path.write_text(_template_text(name, **fields), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_tree(tmp_path: Path, write_template: TemplateWriter) -> Path:
    """Create a small template tree with four packages."""
    write_template("firefox-esr", short_desc="A web browser", homepage="https://www.mozilla.org")
    write_template(
        "clementine",
        short_desc="Modern music player and library organizer",
        depends="gstreamer1-devel alsa-lib-devel>=1.2",
    )
    write_template("zzz-unknown", depends="glibc")
    write_template(
        "qutebrowser",
        short_desc="Keyboard-driven, vim-like browser based on PyQt5",
        depends="python3-PyQt5-webengine",
    )
    return tmp_path / "srcpkgs"


@pytest.fixture
def firefox_record() -> PackageRecord:
    return PackageRecord(
        pkgname="firefox-esr",
        short_desc="A web browser",
        homepage="https://www.mozilla.org",
        maintainer="Jane Doe <jane@example.org>",
        template_path="firefox-esr",
    )


@pytest.fixture
def unknown_record() -> PackageRecord:
    return PackageRecord(
        pkgname="zzz-unknown",
        template_path="srcpkgs/zzz-unknown",
        depends=("glibc",),
    )
