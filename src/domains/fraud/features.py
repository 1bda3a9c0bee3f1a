"""Feature extraction and scaling for the linear fraud model.

Rows arrive from untrusted producers (CSV uploads, generated samples), so every
function here is total: missing or unparsable values degrade to a default
instead of raising.

Feature Schema
--------------
| Feature   | Scaling                                              |
|-----------|------------------------------------------------------|
| Time      | seconds / 172800 (fraction of a 48 hour window)      |
| V1..V28   | passed through                                       |
| Accounts  | identifier encoding, see ``encode_account``          |
"""

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .config import FEATURE_NAMES, LinearModel

_MISSING = object()
_NON_DIGITS = re.compile(r"[^0-9]")
_EXPONENT = re.compile(r"e([+-])0*(\d)")

ACCOUNT_FIELD = "Accounts"
ACCOUNT_NUMERIC_FIELD = "Accounts_numeric"
TIME_FIELD = "Time"

_DEFAULT_MODEL = LinearModel()


def field_value(row: Mapping[str, Any] | None, name: str, default: Any = 0) -> Any:
    """Return ``row[name]``, or ``default`` when the row lacks the field.

    ``None`` counts as absent. Falsy values like ``0`` and ``""`` are kept.
    """
    if row is None:
        return default
    try:
        value = row.get(name, _MISSING)
    except AttributeError:
        return default
    if value is _MISSING or value is None:
        return default
    return value


def parse_number(value: Any) -> float | None:
    """Parse a scalar into a finite float, or None if that is not possible."""
    if value is None:
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def coerce_number(value: Any) -> float:
    """Numeric coercion used for every schema column: non-finite becomes 0."""
    number = parse_number(value)
    return 0.0 if number is None else number


def extract_features(row: Mapping[str, Any] | None) -> dict[str, Any]:
    """Select the schema fields from a raw row, defaulting missing ones to 0."""
    return {name: field_value(row, name, 0) for name in FEATURE_NAMES}


def account_text(value: Any) -> str:
    """String form of an identifier, formatted the way the scoring UI renders it.

    Integral floats drop their fractional part and exponents carry no leading
    zeros, so ``123.0`` and ``123`` hash and tokenize identically.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return _EXPONENT.sub(r"e\1\2", repr(value))
    return str(value)


def account_digits(value: Any) -> str:
    """Keep only the ASCII digits of an identifier."""
    return _NON_DIGITS.sub("", account_text(value))


def string_hash(text: str) -> int:
    """Absolute value of the 32-bit signed polynomial (h * 31 + c) hash.

    Iterates over UTF-16 code units and wraps on every step, so characters
    outside the BMP contribute their surrogate pair.
    """
    h = 0
    units = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(units), 2):
        code = units[i] | (units[i + 1] << 8)
        h = (h * 31 + code) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def _log_scale(value: float, model: LinearModel) -> float:
    if value <= -1:
        return 0.0
    scaled = math.log(value + 1) / model.log_divisor
    return scaled if math.isfinite(scaled) else 0.0


def encode_account(row: Mapping[str, Any] | None, model: LinearModel = _DEFAULT_MODEL) -> float:
    """Map a free-text account identifier onto a bounded log-scaled feature.

    First match wins:

    1. ``Accounts_numeric`` parses to a finite number ``n``: ``ln(n + 1) / 10``.
    2. The identifier contains digits: the last 10 digits as integer ``m``,
       ``ln(m + 1) / 10``.
    3. No digits at all: ``ln(hash % 1e9 + 1) / 10`` over the identifier text.

    An empty or blank ``Accounts_numeric`` does not count as a number and falls
    through to the identifier, unlike the browser scorer where ``Number("")``
    is 0 and the override always wins.
    """
    numeric = parse_number(field_value(row, ACCOUNT_NUMERIC_FIELD, None))
    if numeric is not None:
        return _log_scale(numeric, model)

    raw = field_value(row, ACCOUNT_FIELD, "")
    digits = account_digits(raw)
    if digits:
        tail = digits[-model.account_tail_digits:]
        return _log_scale(int(tail), model)

    hashed = string_hash(account_text(raw)) % model.account_hash_modulus
    return _log_scale(hashed, model)


def scale_features(
    row: Mapping[str, Any] | None,
    features: Mapping[str, Any],
    model: LinearModel = _DEFAULT_MODEL,
) -> dict[str, float]:
    """Turn extracted raw values into model-ready finite floats."""
    scaled: dict[str, float] = {}
    for name in model.feature_names:
        if name == ACCOUNT_FIELD:
            # The extracted placeholder is ignored; encoding reads the raw row.
            scaled[name] = encode_account(row, model)
        elif name == TIME_FIELD:
            scaled[name] = coerce_number(features.get(name, 0)) / model.time_normalizer
        else:
            scaled[name] = coerce_number(features.get(name, 0))
    return scaled
