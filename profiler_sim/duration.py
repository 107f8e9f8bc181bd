"""Integer nanosecond time quantities and their text form."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_GROUP = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def format_duration(ns: int) -> str:
    """Render ``ns`` the way Go prints a ``time.Duration``.

    Values under a second use the largest fitting sub-second unit with a
    trimmed fraction (``10.10101ms``); larger values are split into hours,
    minutes and seconds (``1m40s``).
    """

    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    value = abs(ns)
    if value < SECOND:
        if value < MICROSECOND:
            return f"{sign}{value}ns"
        if value < MILLISECOND:
            return f"{sign}{_with_fraction(value, MICROSECOND, 3)}µs"
        return f"{sign}{_with_fraction(value, MILLISECOND, 6)}ms"

    hours, rest = divmod(value, HOUR)
    minutes, rest = divmod(rest, MINUTE)
    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return f"{out}{_with_fraction(rest, SECOND, 9)}s"


def parse_duration(text: str) -> int:
    """Parse strings such as ``100s``, ``1m40s`` or ``2.5ms`` into nanoseconds."""

    raw = text.strip()
    if not raw:
        msg = "duration must not be empty"
        raise ValueError(msg)
    total = Decimal(0)
    position = 0
    for match in _GROUP.finditer(raw):
        if match.start() != position:
            break
        try:
            amount = Decimal(match.group(1))
        except InvalidOperation:
            break
        total += amount * _UNITS[match.group(2)]
        position = match.end()
    if position != len(raw):
        msg = f"invalid duration {text!r}"
        raise ValueError(msg)
    return int(total)


def _with_fraction(value: int, scale: int, digits: int) -> str:
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    return f"{whole}.{frac:0{digits}d}".rstrip("0")
