"""Default-resolution rules kept for compatibility with existing worker configs."""

from __future__ import annotations

from typing import Optional

EMPTY_SENTINEL = "<empty>"
DEFAULT_PREFETCH_COUNT = 3
DEFAULT_EXCHANGE_TYPE = "direct"

_INT32_SPAN = 1 << 32
_INT32_MAX = (1 << 31) - 1


def translate_sentinel(raw: Optional[str]) -> Optional[str]:
    """Translate a raw sentinel-aware value.

    A missing or blank value means the setting is unset (``None``), while the
    literal ``"<empty>"`` marks a setting that is explicitly configured as the
    empty string.
    """
    if raw is None or raw == "":
        return None
    if raw == EMPTY_SENTINEL:
        return ""
    return raw


def resolve_prefetch_count(count: int) -> int:
    """Return the configured prefetch count, or 3 when it was left at zero."""
    if count == 0:
        return DEFAULT_PREFETCH_COUNT
    return count


def resolve_exchange_type(
    name: Optional[str], exchange_type: str, durable: bool, auto_delete: bool
) -> str:
    """Return the exchange type, defaulting to ``direct`` only for an untouched section.

    Configs written before the exchange section existed leave every exchange
    field unset; those keep the implicit direct exchange. Any other combination
    returns ``exchange_type`` verbatim, even when it is empty.
    """
    if name is None and exchange_type == "" and not durable and not auto_delete:
        return DEFAULT_EXCHANGE_TYPE
    return exchange_type


def wrap_int32(value: int) -> int:
    """Narrow ``value`` to a signed 32-bit integer, wrapping on overflow."""
    wrapped = value % _INT32_SPAN
    if wrapped > _INT32_MAX:
        wrapped -= _INT32_SPAN
    return wrapped
