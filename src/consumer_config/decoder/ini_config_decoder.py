"""INI implementation of the configuration decoder."""

from __future__ import annotations

import configparser
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from consumer_config.contracts import IConfigDecoder
from consumer_config.errors import ParseError
from consumer_config.settings import (
    ConsumerConfig,
    ExchangeSettings,
    LogSettings,
    PrefetchSettings,
    QueueSettings,
    RabbitMqSettings,
    translate_sentinel,
)

_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
_FALSE_VALUES = frozenset({"false", "no", "off", "0"})
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "t": "\t", "b": "\b"}
# Never matches a real section header, so ``[DEFAULT]`` is an ordinary (unknown) section.
_NO_DEFAULT_SECTION = ""


def normalize_name(name: str) -> str:
    """Fold a section or key name so matching ignores case, dashes and underscores."""
    return name.lower().replace("-", "").replace("_", "")


def _parse_str(value: Optional[str]) -> str:
    if value is None:
        raise ValueError("a value is required")
    return value


def _parse_sentinel(value: Optional[str]) -> Optional[str]:
    return translate_sentinel(_parse_str(value))


def _parse_bool(value: Optional[str]) -> bool:
    # A bare key without "=" switches the flag on.
    if value is None:
        return True
    folded = value.lower()
    if folded in _TRUE_VALUES:
        return True
    if folded in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean {value!r}")


def _parse_int(value: Optional[str]) -> int:
    text = _parse_str(value).strip()
    if "_" in text:
        raise ValueError(f"invalid integer {value!r}")
    digits = text.lstrip("+-")
    try:
        if digits[:2].lower() == "0x":
            number = int(text, 16)
        else:
            number = int(text, 10)
    except ValueError:
        raise ValueError(f"invalid integer {value!r}") from None
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"integer {value!r} out of range")
    return number


_Field = Tuple[str, Callable[[Optional[str]], Any]]


class _SectionSchema:
    def __init__(
        self,
        name: str,
        attribute: str,
        settings_type: Type[Any],
        fields: Mapping[str, _Field],
    ) -> None:
        self.name = name
        self.attribute = attribute
        self.settings_type = settings_type
        self.fields = {normalize_name(key): spec for key, spec in fields.items()}


_SCHEMA: Dict[str, _SectionSchema] = {
    normalize_name(schema.name): schema
    for schema in (
        _SectionSchema(
            "RabbitMq",
            "rabbitmq",
            RabbitMqSettings,
            {
                "AmqpUrl": ("amqp_url", _parse_str),
                "Host": ("host", _parse_str),
                "Username": ("username", _parse_str),
                "Password": ("password", _parse_str),
                "Port": ("port", _parse_str),
                "Vhost": ("vhost", _parse_str),
                "Queue": ("queue", _parse_str),
                "Compression": ("compression", _parse_bool),
                "OnFailure": ("on_failure", _parse_int),
            },
        ),
        _SectionSchema(
            "Prefetch",
            "prefetch",
            PrefetchSettings,
            {
                "Count": ("count", _parse_int),
                "Global": ("global_", _parse_bool),
            },
        ),
        _SectionSchema(
            "QueueSettings",
            "queue_settings",
            QueueSettings,
            {
                "RoutingKey": ("routing_key", _parse_sentinel),
                "MessageTTL": ("message_ttl", _parse_int),
                "DeadLetterExchange": ("dead_letter_exchange", _parse_sentinel),
                "DeadLetterRoutingKey": ("dead_letter_routing_key", _parse_sentinel),
            },
        ),
        _SectionSchema(
            "Exchange",
            "exchange",
            ExchangeSettings,
            {
                "Name": ("name", _parse_sentinel),
                "AutoDelete": ("auto_delete", _parse_bool),
                "Type": ("type", _parse_str),
                "Durable": ("durable", _parse_bool),
            },
        ),
        _SectionSchema(
            "Logs",
            "logs",
            LogSettings,
            {
                "Error": ("error", _parse_str),
                "Info": ("info", _parse_str),
            },
        ),
    )
}


def unquote_value(raw: str) -> str:
    """Strip comments and quoting from a raw INI value.

    Double quotes may wrap all or part of the value; inside or outside them a
    backslash escapes ``\\``, ``"``, ``n``, ``t`` and ``b``. An unquoted ``;`` or
    ``#`` starts a comment. Unquoted trailing whitespace is dropped.
    """
    chars: List[str] = []
    keep = 0
    quoted = False
    index = 0
    while index < len(raw):
        char = raw[index]
        if char == "\\":
            index += 1
            if index >= len(raw) or raw[index] not in _ESCAPES:
                raise ValueError("invalid escape sequence")
            chars.append(_ESCAPES[raw[index]])
            keep = len(chars)
        elif char == '"':
            quoted = not quoted
            keep = len(chars)
        elif not quoted and char in ";#":
            break
        else:
            chars.append(char)
            if quoted or not char.isspace():
                keep = len(chars)
        index += 1

    if quoted:
        raise ValueError("unterminated quoted string")
    return "".join(chars[:keep])


def _continues(line: str) -> bool:
    quoted = False
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            if index == len(line) - 1:
                return True
            index += 2
            continue
        if char == '"':
            quoted = not quoted
        elif not quoted and char in ";#":
            return False
        index += 1
    return False


def join_continued_lines(text: str) -> str:
    """Join value lines that end in an escaped newline with the line after them.

    A backslash inside a comment does not continue the line.
    """
    joined: List[str] = []
    pending = ""
    for line in text.splitlines():
        line = pending + line
        pending = ""
        if not line.lstrip().startswith(("#", ";", "[")) and _continues(line):
            pending = line[:-1]
            continue
        joined.append(line)
    if pending:
        # A continuation with nothing after it is left for the value parser to reject.
        joined.append(pending + "\\")
    return "\n".join(joined)


class _IniParser(configparser.ConfigParser):
    def optionxform(self, optionstr: str) -> str:
        return normalize_name(optionstr)


class IniConfigDecoder(IConfigDecoder):
    """Decodes INI text with ``[RabbitMq]``, ``[Prefetch]``, ``[QueueSettings]``,
    ``[Exchange]`` and ``[Logs]`` sections into a ``ConsumerConfig``.

    Unknown sections or keys, and any section or key given twice, are rejected.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def decode(self, text: str) -> ConsumerConfig:
        parser = self._read(text)

        sections: Dict[str, Any] = {}
        seen: Dict[str, str] = {}
        for section_name in parser.sections():
            folded = normalize_name(section_name)
            schema = _SCHEMA.get(folded)
            if schema is None:
                raise ParseError(f"Unknown section [{section_name}].", section=section_name)
            if folded in seen:
                raise ParseError(
                    f"Section [{section_name}] duplicates [{seen[folded]}].",
                    section=section_name,
                )
            seen[folded] = section_name

            settings = self._decode_section(schema, section_name, parser[section_name])
            sections[schema.attribute] = settings

        self.logger.debug("Decoded configuration sections: %s", ", ".join(seen.values()) or "none")
        return ConsumerConfig(**sections)

    def _read(self, text: str) -> configparser.ConfigParser:
        parser = _IniParser(
            delimiters=("=",),
            interpolation=None,
            strict=True,
            allow_no_value=True,
            comment_prefixes=("#", ";"),
            inline_comment_prefixes=None,
            empty_lines_in_values=False,
            default_section=_NO_DEFAULT_SECTION,
        )
        try:
            parser.read_string(join_continued_lines(text))
        except configparser.DuplicateSectionError as exc:
            raise ParseError(
                f"Section [{exc.section}] appears more than once.",
                section=exc.section,
                line=exc.lineno,
            ) from exc
        except configparser.DuplicateOptionError as exc:
            raise ParseError(
                f"Key {exc.option!r} appears more than once in [{exc.section}].",
                section=exc.section,
                key=exc.option,
                line=exc.lineno,
            ) from exc
        except configparser.MissingSectionHeaderError as exc:
            raise ParseError(
                f"Line {exc.lineno} appears before any section header.",
                line=exc.lineno,
            ) from exc
        except configparser.ParsingError as exc:
            line = exc.errors[0][0] if exc.errors else None
            raise ParseError(f"Malformed configuration text at line {line}.", line=line) from exc
        except configparser.Error as exc:
            raise ParseError(f"Malformed configuration text: {exc}") from exc
        return parser

    def _decode_section(
        self,
        schema: _SectionSchema,
        section_name: str,
        values: Mapping[str, Optional[str]],
    ) -> Any:
        kwargs: Dict[str, Any] = {}
        for key, raw in values.items():
            spec = schema.fields.get(key)
            if spec is None:
                raise ParseError(
                    f"Unknown key {key!r} in [{section_name}].",
                    section=section_name,
                    key=key,
                )
            field_name, parse = spec
            try:
                if raw is not None and "\n" in raw:
                    raise ValueError("multi-line values are not supported")
                value = parse(None if raw is None else unquote_value(raw))
            except ValueError as exc:
                raise ParseError(
                    f"Invalid value for {key!r} in [{section_name}]: {exc}.",
                    section=section_name,
                    key=key,
                ) from exc
            kwargs[field_name] = value
        return schema.settings_type(**kwargs)
