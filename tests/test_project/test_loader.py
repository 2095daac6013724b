"""Tests for loading documents, including this project's own document."""

import copy
from pathlib import Path

import pytest

from twconfig import (
    SUPPRESS,
    ConfigurationDocument,
    ParseError,
    Patch,
    SchemaError,
    load_file,
    load_mapping,
    read_mapping,
)
from twconfig.config import GeneratorSettings
from twconfig.project import CONFIG, RAW_CONFIG

ROOT = Path(__file__).parent.parent.parent
FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestProjectDocument:
    def test_content(self):
        assert CONFIG.content == ("./src/*.rs",)

    def test_plugins_in_load_order(self):
        assert CONFIG.plugins == ("@tailwindcss/forms", "@tailwindcss/typography")

    @pytest.mark.parametrize("selector", ["strong", "img", "figure", "a", "code", "pre"])
    def test_suppressed(self, selector):
        assert CONFIG.overrides()[selector] is SUPPRESS

    def test_pseudo_element_patches(self):
        overrides = CONFIG.overrides()
        assert overrides["code::before"] == Patch({"content": "none"})
        assert overrides["code::after"] == Patch({"content": "none"})

    def test_pre_code_patch(self):
        assert CONFIG.overrides()["pre code"] == Patch({"white-space": "pre-wrap"})

    def test_round_trips_to_raw(self):
        assert CONFIG.to_mapping() == RAW_CONFIG

    def test_js_file_loads_to_same_document(self):
        assert load_file(ROOT / "tailwind.config.js") == CONFIG

    def test_project_document_is_hashable(self):
        assert hash(CONFIG) == hash(load_mapping(RAW_CONFIG))


class TestLoadMapping:
    def test_unknown_keys_preserved(self):
        raw = copy.deepcopy(RAW_CONFIG)
        raw["bogusKey"] = {"flag": True}
        doc = load_mapping(raw)
        assert doc.extra == {"bogusKey": {"flag": True}}

    def test_strict_unknown_keys(self):
        raw = copy.deepcopy(RAW_CONFIG)
        raw["bogusKey"] = 1
        with pytest.raises(SchemaError):
            load_mapping(raw, GeneratorSettings(strict_keys=True))

    def test_theme_replace_and_extend_other(self):
        raw = {
            "content": ["a.html"],
            "theme": {"screens": {"sm": "640px"}, "extend": {"colors": {"x": "#fff"}}},
        }
        doc = load_mapping(raw)
        assert doc.theme.replace == {"screens": {"sm": "640px"}}
        assert doc.theme.extend.other == {"colors": {"x": "#fff"}}
        assert doc.theme.extend.typography == {}

    def test_minimal(self):
        assert load_mapping({"content": ["a.html"]}) == ConfigurationDocument(content=("a.html",))

    def test_logs_warnings(self, caplog: pytest.LogCaptureFixture):
        load_mapping({"content": []})
        assert any("No content patterns" in r.message for r in caplog.records)


class TestReadMapping:
    def test_json(self):
        raw = read_mapping(FIXTURES / "bad_shape.json")
        assert raw["content"] == "./src/*.rs"

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "tailwind.config.toml"
        path.write_text("")
        with pytest.raises(ParseError, match="Unsupported"):
            read_mapping(path)

    def test_load_file_schema_error(self):
        with pytest.raises(SchemaError):
            load_file(FIXTURES / "bad_shape.json")

    def test_invalid_utf8_is_parse_error(self, tmp_path: Path):
        path = tmp_path / "tailwind.config.js"
        path.write_bytes(b'module.exports = {\n  content: ["\xff"],\n}')
        with pytest.raises(ParseError, match="Invalid UTF-8") as info:
            read_mapping(path)
        assert info.value.line == 2
        assert info.value.column == 14


class TestDocumentIsolation:
    def _raw(self) -> dict:
        return {
            "content": ["a.html"],
            "theme": {"screens": {"sm": "640px"}, "extend": {"colors": {"x": "#fff"}}},
            "bogusKey": {"flag": True},
        }

    def test_mutating_raw_does_not_change_document(self):
        raw = self._raw()
        doc = load_mapping(raw)
        raw["theme"]["extend"]["colors"]["x"] = "#000"
        raw["theme"]["screens"]["sm"] = "1px"
        raw["bogusKey"]["flag"] = False
        assert doc == load_mapping(self._raw())
        assert doc.theme.extend.other == {"colors": {"x": "#fff"}}
        assert doc.theme.replace == {"screens": {"sm": "640px"}}
        assert doc.extra == {"bogusKey": {"flag": True}}

    def test_mutating_serialized_mapping_does_not_change_document(self):
        doc = load_mapping(self._raw())
        out = doc.to_mapping()
        out["theme"]["extend"]["colors"]["x"] = "#000"
        out["theme"]["screens"]["sm"] = "1px"
        out["bogusKey"]["flag"] = False
        again = doc.to_mapping()
        assert again["theme"] == self._raw()["theme"]
        assert again["bogusKey"] == {"flag": True}
