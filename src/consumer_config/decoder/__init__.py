"""Configuration text decoders."""

from .ini_config_decoder import (
    IniConfigDecoder,
    join_continued_lines,
    normalize_name,
    unquote_value,
)

__all__ = ["IniConfigDecoder", "join_continued_lines", "normalize_name", "unquote_value"]
