"""Conversions of loosely typed event arguments and configuration values."""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from typing import Any

_log = logging.getLogger(__name__)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int64(s: str) -> int:
    """Parse a strict base-10 signed 64-bit integer or raise ValueError."""
    if not _DECIMAL_RE.fullmatch(s):
        raise ValueError(f"invalid integer: {s!r}")
    value = int(s)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {s!r}")
    return value


def str_to_int64(s: str) -> int:
    """Parse a base-10 integer, returning 0 if it is malformed or out of range."""
    try:
        return _parse_int64(s)
    except ValueError:
        return 0


def parse_number(v: Any) -> int:
    """Convert an integer argument to a 64-bit integer; anything else gives 0."""
    if isinstance(v, bool) or not isinstance(v, int):
        return 0
    return str_to_int64(str(int(v)))


def _format_float(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    d = Decimal(repr(x)).normalize()
    sign, digits, exponent = d.as_tuple()
    exp10 = len(digits) + exponent - 1
    if exp10 < -4 or exp10 >= 6:
        text = "".join(map(str, digits))
        mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(exp10):02d}"
    return format(d, "f")


def parse_string(v: Any) -> str:
    """Render any value as its default textual form."""
    if isinstance(v, str):
        return v
    if isinstance(v, bool):
        return "true" if v else "false"
    if v is None:
        return "<nil>"
    if isinstance(v, int):
        return str(int(v))
    if isinstance(v, float):
        return _format_float(v)
    return str(v)


def parse_int_slice(param: str) -> list[int]:
    """Parse a comma-separated list of integers, skipping malformed entries."""
    result = []
    for item in param.split(","):
        try:
            result.append(_parse_int64(item))
        except ValueError:
            _log.warning("invalid integer list parameter: %r", param)
    return result