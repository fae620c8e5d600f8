from __future__ import annotations

import json
import math
from typing import Any, Union

JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]

# Sentinel for "field not present"; distinct from a stored null.
MISSING: Any = object()


def json_equal(a: Any, b: Any) -> bool:
    """
    Deep structural equality over JSON-like values.

    Differs from `==` where Python and JSON disagree: booleans are never equal
    to numbers (True != 1), and tuples are not accepted as arrays.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if isinstance(a, dict):
        if not isinstance(b, dict) or a.keys() != b.keys():
            return False
        return all(json_equal(v, b[k]) for k, v in a.items())
    if isinstance(a, list):
        if not isinstance(b, list) or len(a) != len(b):
            return False
        return all(json_equal(x, y) for x, y in zip(a, b))
    if a is None or b is None:
        return a is None and b is None
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    return False


def format_float(value: float) -> str:
    """
    Shortest round-trip float text in the layout sort keys are compared in:

    - 10^-5 <= |v| < 10^16 in plain decimal, always with a fractional part
      (`1000000000000000.0`, `0.00001`)
    - anything else with a bare exponent (`1e16`, `2.5e20`, `1e-7`)
    - non-finite values as `null`
    """
    if not math.isfinite(value):
        return "null"
    if value == 0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"

    sign = "-" if value < 0 else ""
    mantissa, _, exp = repr(abs(value)).partition("e")
    whole, _, frac = mantissa.partition(".")
    digits = (whole + frac).lstrip("0")
    e = int(exp or 0) - len(frac)
    stripped = digits.rstrip("0")
    e += len(digits) - len(stripped)
    digits = stripped

    n = len(digits)
    kk = n + e  # 10^(kk-1) <= |v| < 10^kk
    if 0 <= e and kk <= 16:
        text = digits + "0" * e + ".0"
    elif 0 < kk <= 16:
        text = digits[:kk] + "." + digits[kk:]
    elif -5 < kk <= 0:
        text = "0." + "0" * -kk + digits
    elif n == 1:
        text = f"{digits}e{kk - 1}"
    else:
        text = f"{digits[0]}.{digits[1:]}e{kk - 1}"
    return sign + text


def canonical_json(value: Any) -> str:
    """Compact, key-sorted JSON text. Only used as a sort key."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, list):
        return "[" + ",".join(canonical_json(v) for v in value) + "]"
    if isinstance(value, dict):
        items = sorted(value.items())
        return "{" + ",".join(f"{canonical_json(k)}:{canonical_json(v)}" for k, v in items) + "}"
    return json.dumps(value, ensure_ascii=False)


def field_of(document: Any, name: str) -> Any:
    if not isinstance(document, dict):
        return MISSING
    return document.get(name, MISSING)
