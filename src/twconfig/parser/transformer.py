"""Lark Transformer that converts a tailwind.config.js parse tree into plain data."""

from __future__ import annotations

import json
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from twconfig.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# JS escapes that have a single-character replacement.
_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|.)", re.DOTALL
)


def _unescape(body: str, token: Token | None = None) -> str:
    def replace(match: re.Match[str]) -> str:
        esc = match.group(1)
        if esc.startswith("u{"):
            code = int(esc[2:-1], 16)
            if code > 0x10FFFF:
                raise ParseError(
                    f"Undefined Unicode code-point: \\{esc}",
                    line=getattr(token, "line", None),
                    column=getattr(token, "column", None),
                )
            return chr(code)
        if esc[0] in "ux" and len(esc) > 1:
            return chr(int(esc[1:], 16))
        return _ESCAPES.get(esc, esc)

    return _ESCAPE_RE.sub(replace, body)


class ConfigTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into dicts, lists, strings and numbers.

    ``require("pkg")`` calls become the plain string ``"pkg"``: the required
    module name is the plugin identifier.
    """

    # ---- scalars ----

    def string(self, items: list[Token]) -> str:
        raw = str(items[0])
        return _unescape(raw[1:-1], items[0])

    def number(self, items: list[Token]) -> int | float:
        raw = str(items[0])
        if re.fullmatch(r"[+-]?\d+", raw):
            return int(raw)
        return float(raw)

    def true(self, items: list[Token]) -> bool:
        return True

    def false(self, items: list[Token]) -> bool:
        return False

    def null(self, items: list[Token]) -> None:
        return None

    # ---- structural ----

    def name_key(self, items: list[Token]) -> str:
        return str(items[0])

    def string_key(self, items: list[str]) -> str:
        return items[0]

    def number_key(self, items: list[Token]) -> str:
        return str(items[0])

    def pair(self, items: list[object]) -> tuple[str, object]:
        return (str(items[0]), items[1])

    def object(self, items: list[tuple[str, object]]) -> dict[str, object]:
        # Duplicate keys: last write wins, as in JS.
        return dict(items)

    def array(self, items: list[object]) -> list[object]:
        return list(items)

    def call(self, items: list[object]) -> str:
        callee = items[0]
        args = items[1:]
        if str(callee) == "require" and len(args) == 1 and isinstance(args[0], str):
            return args[0]
        raise ParseError(
            f"Unsupported call expression '{callee}(...)'; only require(\"module\") is allowed",
            line=getattr(callee, "line", None),
            column=getattr(callee, "column", None),
        )

    # ---- module forms ----

    def commonjs(self, items: list[object]) -> object:
        return items[0]

    def esm(self, items: list[object]) -> object:
        return items[0]

    def bare(self, items: list[object]) -> object:
        return items[0]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )


def parse_config_source(source: str) -> dict[str, object]:
    """Parse a ``tailwind.config.js`` source string into a nested mapping."""
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    try:
        result = ConfigTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise ParseError(str(e.orig_exc)) from e
    if not isinstance(result, dict):
        raise ParseError(
            f"Config must export an object literal, got {type(result).__name__}"
        )
    return result


def parse_json_source(source: str) -> dict[str, object]:
    """Parse a JSON config document into a nested mapping."""
    try:
        result = json.loads(source)
    except json.JSONDecodeError as e:
        raise ParseError(e.msg, line=e.lineno, column=e.colno) from e
    if not isinstance(result, dict):
        raise ParseError(
            f"Config must be a JSON object, got {type(result).__name__}"
        )
    return result
