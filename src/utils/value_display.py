"""
Rendering of Firestore field values for the guest check report.

Values are shown the way the web app sees them at runtime: type tags follow
JavaScript's typeof (null is an "object", absent fields are "undefined") and
values print as they would inside a template string.
"""

import base64
import calendar
import math
from datetime import datetime
from decimal import Decimal
from typing import Any


class _Missing:
    """Marker for a field that is absent from a document."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def type_label(value: Any) -> str:
    """Return the JavaScript typeof tag for a field value."""
    if value is MISSING:
        return "undefined"
    # bool must be checked before int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def _display_number(value: float) -> str:
    """Format a double like Number.prototype.toString."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + _display_number(-value)

    # repr gives the shortest round-tripping digits
    _, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return "0." + "0" * -n + digits

    e = n - 1
    sign = "+" if e >= 0 else "-"
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{mantissa}e{sign}{abs(e)}"


def _display_timestamp(value: datetime) -> str:
    seconds = calendar.timegm(value.utctimetuple())
    nanoseconds = getattr(value, "nanosecond", value.microsecond * 1000)
    return f"Timestamp(seconds={seconds}, nanoseconds={nanoseconds})"


def display_value(value: Any) -> str:
    """Return the string a field value produces when interpolated."""
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _display_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ",".join(
            "" if item is None or item is MISSING else display_value(item)
            for item in value
        )
    if isinstance(value, datetime):
        return _display_timestamp(value)
    if isinstance(value, bytes):
        return f"Bytes(base64: {base64.b64encode(value).decode('ascii')})"
    return "[object Object]"
