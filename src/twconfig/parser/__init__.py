from twconfig.parser.errors import ParseError
from twconfig.parser.transformer import parse_config_source, parse_json_source

__all__ = ["ParseError", "parse_config_source", "parse_json_source"]
