"""Tests for the tailwind.config.js and JSON config parsers."""

from pathlib import Path

import pytest

from twconfig.parser import ParseError, parse_config_source, parse_json_source
from twconfig.project import RAW_CONFIG

ROOT = Path(__file__).parent.parent.parent
FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Fixture file tests
# ---------------------------------------------------------------------------


class TestProjectConfigFile:
    def test_matches_python_document(self):
        source = (ROOT / "tailwind.config.js").read_text()
        assert parse_config_source(source) == RAW_CONFIG


class TestSiteFixture:
    @pytest.fixture()
    def config(self) -> dict:
        return parse_config_source((FIXTURES / "site" / "tailwind.config.js").read_text())

    def test_content(self, config: dict) -> None:
        assert config["content"] == ["./src/*.rs", "./templates/**/*.{html,hbs}"]

    def test_require_calls_become_identifiers(self, config: dict) -> None:
        assert config["plugins"] == ["@tailwindcss/forms", "@tailwindcss/typography"]

    def test_numeric_keys(self, config: dict) -> None:
        brand = config["theme"]["extend"]["colors"]["brand"]
        assert brand == {"50": "#f5f7ff", "900": "#1e1b4b"}

    def test_typography_css(self, config: dict) -> None:
        css = config["theme"]["extend"]["typography"]["DEFAULT"]["css"]
        assert css["a"] == "none"
        assert css["code::before"] == {"content": "none"}
        assert css["pre code"] == {"white-space": "pre-wrap"}


# ---------------------------------------------------------------------------
# Module forms
# ---------------------------------------------------------------------------


class TestModuleForms:
    def test_commonjs(self):
        assert parse_config_source('module.exports = { content: [] }') == {"content": []}

    def test_esm_default_export(self):
        assert parse_config_source("export default { plugins: [] };") == {"plugins": []}

    def test_bare_object(self):
        assert parse_config_source("{ a: 1 }") == {"a": 1}

    def test_non_object_export_rejected(self):
        with pytest.raises(ParseError):
            parse_config_source("module.exports = [1, 2]")


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


class TestValues:
    def test_scalars(self):
        src = "{ a: true, b: false, c: null, d: -2, e: 1.5, f: 'x' }"
        assert parse_config_source(src) == {
            "a": True,
            "b": False,
            "c": None,
            "d": -2,
            "e": 1.5,
            "f": "x",
        }

    def test_string_escapes(self):
        src = r"""{ content: '"`"', q: "it\'s", nl: "a\nb" }"""
        assert parse_config_source(src) == {"content": '"`"', "q": "it's", "nl": "a\nb"}

    def test_unicode_escapes(self):
        src = r"""{ a: "\u00e9", b: "\x41", c: "\u{1F600}", d: "\u{41}" }"""
        assert parse_config_source(src) == {"a": "\u00e9", "b": "A", "c": "\U0001F600", "d": "A"}

    def test_trailing_commas(self):
        assert parse_config_source("{ a: [1, 2,], b: { c: 'd', }, }") == {
            "a": [1, 2],
            "b": {"c": "d"},
        }

    def test_empty_containers(self):
        assert parse_config_source("{ a: [], b: {} }") == {"a": [], "b": {}}

    def test_duplicate_keys_last_wins(self):
        assert parse_config_source("{ a: 1, a: 2 }") == {"a": 2}

    def test_quoted_selector_keys(self):
        src = """{ "pre code": { 'white-space': "pre-wrap" } }"""
        assert parse_config_source(src) == {"pre code": {"white-space": "pre-wrap"}}

    def test_comments_ignored(self):
        src = """
        /* block
           comment */
        module.exports = {
          // line comment
          content: ["a.html"], // trailing
        }
        """
        assert parse_config_source(src) == {"content": ["a.html"]}


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_syntax_error_has_position(self):
        with pytest.raises(ParseError) as info:
            parse_config_source("module.exports = {\n  content: [,\n}")
        assert info.value.line == 2

    def test_unsupported_call(self):
        with pytest.raises(ParseError, match="Unsupported call"):
            parse_config_source('{ plugins: [plugin("x")] }')

    def test_require_with_two_args_rejected(self):
        with pytest.raises(ParseError):
            parse_config_source('{ plugins: [require("a", "b")] }')

    def test_unterminated_string(self):
        with pytest.raises(ParseError):
            parse_config_source('{ content: ["a.html] }')

    def test_code_point_out_of_range(self):
        with pytest.raises(ParseError, match="Undefined Unicode code-point") as info:
            parse_config_source('{\n  a: "\\u{110000}" }')
        assert info.value.line == 2


class TestJsonSource:
    def test_parses_object(self):
        assert parse_json_source('{"content": ["a"]}') == {"content": ["a"]}

    def test_invalid_json(self):
        with pytest.raises(ParseError) as info:
            parse_json_source('{"content": ')
        assert info.value.line == 1

    def test_non_object_rejected(self):
        with pytest.raises(ParseError):
            parse_json_source("[]")
