"""Tests for manual category overrides."""

import json
import logging
from pathlib import Path

import pytest

from category_harvest.categorization.overrides import OverrideTable
from category_harvest.consts import DEFAULT_OVERRIDES_PATH
from category_harvest.errors import OverrideConfigError


class TestFromMapping:
    """Tests for OverrideTable.from_mapping."""

    def test_inverts_categories(self) -> None:
        table = OverrideTable.from_mapping(
            {
                "Browsers": {"packages": ["qutebrowser", "nyxt"]},
                "Chat": {"packages": ["pidgin"]},
            }
        )

        assert len(table) == 3
        assert table.lookup("qutebrowser") == "Browsers"
        assert table.lookup("pidgin") == "Chat"

    def test_category_keys_case_insensitive(self) -> None:
        table = OverrideTable.from_mapping({"tools and utilities": {"packages": ["fd"]}})
        assert table.lookup("fd") == "Tools and Utilities"

    def test_package_lookup_case_insensitive(self) -> None:
        table = OverrideTable.from_mapping({"Music": {"packages": ["CMus"]}})

        assert table.lookup("cmus") == "Music"
        assert table.lookup("CMUS") == "Music"
        assert "cMuS" in table

    def test_bare_list_section(self) -> None:
        table = OverrideTable.from_mapping({"Music": ["mpd", "cmus"]})
        assert table.lookup("mpd") == "Music"

    def test_unknown_category_raises(self) -> None:
        with pytest.raises(OverrideConfigError, match="unknown category 'Podcasts'"):
            OverrideTable.from_mapping({"Podcasts": {"packages": ["gpodder"]}})

    def test_malformed_section_raises(self) -> None:
        with pytest.raises(OverrideConfigError, match="Invalid override section"):
            OverrideTable.from_mapping({"Music": {"packages": "mpd"}})

    def test_non_table_document_raises(self) -> None:
        with pytest.raises(OverrideConfigError):
            OverrideTable.from_mapping(["Music"])  # type: ignore[arg-type]

    def test_duplicate_package_keeps_first(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            table = OverrideTable.from_mapping(
                {
                    "Music": {"packages": ["audacity"]},
                    "Video": {"packages": ["audacity"]},
                }
            )

        assert table.lookup("audacity") == "Music"
        assert "audacity" in caplog.text

    def test_blank_names_ignored(self) -> None:
        table = OverrideTable.from_mapping({"Music": {"packages": ["", "  ", "mpd"]}})
        assert len(table) == 1

    def test_empty_section(self) -> None:
        table = OverrideTable.from_mapping({"Music": {}})
        assert len(table) == 0

    def test_unknown_package(self) -> None:
        assert OverrideTable().lookup("anything") is None


class TestLoad:
    """Tests for OverrideTable.load."""

    def test_load_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "overrides.toml"
        path.write_text(
            '[Browsers]\npackages = ["qutebrowser"]\n\n[E-mail]\npackages = ["neomutt"]\n',
            encoding="utf-8",
        )

        table = OverrideTable.load(path)

        assert table.lookup("qutebrowser") == "Browsers"
        assert table.lookup("neomutt") == "E-mail"

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps({"Gaming": {"packages": ["0ad"]}}), encoding="utf-8")

        table = OverrideTable.load(path)

        assert table.lookup("0ad") == "Gaming"

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        table = OverrideTable.load(tmp_path / "absent.toml")
        assert len(table) == 0

    def test_none_path_is_empty(self) -> None:
        assert len(OverrideTable.load(None)) == 0

    def test_unparsable_toml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "overrides.toml"
        path.write_text("[Browsers\npackages = ", encoding="utf-8")

        with pytest.raises(OverrideConfigError, match="Failed to parse"):
            OverrideTable.load(path)

    def test_unparsable_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "overrides.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(OverrideConfigError, match="Failed to parse"):
            OverrideTable.load(path)

    def test_unknown_category_in_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "overrides.toml"
        path.write_text('[Databases]\npackages = ["postgresql"]\n', encoding="utf-8")

        with pytest.raises(OverrideConfigError, match="Databases"):
            OverrideTable.load(path)

    def test_shipped_overrides_are_valid(self) -> None:
        table = OverrideTable.load(DEFAULT_OVERRIDES_PATH)

        assert len(table) > 0
        assert table.lookup("qutebrowser") == "Browsers"
