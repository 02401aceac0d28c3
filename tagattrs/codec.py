"""
Encode/decode primitives between stored attribute strings and Python values.

Stored values are always in encoded (escaped) form. Reading decodes, writing
encodes; nothing else transforms them.
"""

from __future__ import annotations

import html
import json
import math
import re
from decimal import Decimal
from typing import Any, Optional, Union

# Literal keywords coerced to their Python counterparts on data reads
PRIMITIVES: dict[str, Any] = {
    "null": None,
    "true": True,
    "false": False,
}

# Strings that look like a JSON object or array
_BRACE_RE = re.compile(r"\{[\w\W]*\}|\[[\w\W]*\]")


def decode(raw: str) -> str:
    """Reverse character-reference escaping."""
    return html.unescape(raw)


def stringify(value: Any) -> str:
    """Render a Python value as the string written into a node map."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def encode(value: Any) -> str:
    """Escape a value for attribute-value position."""
    return html.escape(stringify(value), quote=True)


def _digits(number: float) -> tuple[str, int]:
    """Shortest round-trip digits of a positive finite float and the
    position of the decimal point relative to them."""
    _, digits, exponent = Decimal(repr(number)).as_tuple()
    text = "".join(map(str, digits)).rstrip("0")
    exponent += len(digits) - len(text)
    return text, exponent + len(text)


def format_number(number: Union[int, float]) -> str:
    """Canonical number text (``42``, ``1.5``, ``0.000001``, ``1e-7``, ``1e+21``).

    Fixed notation is used from 1e-6 up to 1e21, exponent notation outside
    that range, with an unpadded exponent.
    """
    if isinstance(number, int) and abs(number) < 10**21:
        return str(number)
    number = float(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"
    if number < 0:
        return "-" + format_number(-number)

    digits, point = _digits(number)
    k = len(digits)
    if k <= point <= 21:
        return digits + "0" * (point - k)
    if 0 < point <= 21:
        return f"{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return "0." + "0" * -point + digits

    exponent = point - 1
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def parse_number(value: str) -> Optional[Union[int, float]]:
    """Return the number ``value`` spells canonically, else None.

    ``"42"``, ``"1.5"``, ``"1e-7"`` and ``"Infinity"`` qualify; ``"042"``,
    ``"1.0"`` and ``" 7"`` do not, because they do not survive a
    number-to-text round trip unchanged.
    """
    try:
        number = float(value)
    except ValueError:
        return None
    if format_number(number) != value:
        return None
    if number.is_integer() and abs(number) < 1e21:
        return int(number)
    return number


def coerce(value: str) -> Any:
    """Turn a decoded data string into null/bool/number/JSON where it fits.

    Raises:
        json.JSONDecodeError: when the value has a JSON object/array shape
            but is not valid JSON.
    """
    if value in PRIMITIVES:
        return PRIMITIVES[value]
    number = parse_number(value)
    if number is not None:
        return number
    if _BRACE_RE.fullmatch(value):
        return json.loads(value)
    return value


__all__ = [
    "PRIMITIVES",
    "coerce",
    "decode",
    "encode",
    "format_number",
    "parse_number",
    "stringify",
]
