"""Numeric coercion shared by CSV dynamic typing and the balance check.

Statement exports carry balances either as text (XML) or as cells that look
numeric (CSV). Both paths go through :func:`to_decimal` so that ``"10.00"``
and ``10`` compare equal once rounded to cents.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .record import FieldValue

# Plain decimal or scientific notation, optional sign, surrounding whitespace.
_NUMERIC_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")

CENTS = Decimal("0.01")


def looks_numeric(value: str) -> bool:
    return bool(_NUMERIC_RE.fullmatch(value))


def coerce_cell(value: str | None) -> FieldValue:
    """Return a ``Decimal`` for numeric-looking text, else the text unchanged."""

    if value is None or not looks_numeric(value):
        return value
    return Decimal(value.strip())


def to_decimal(value: object) -> Decimal:
    """Coerce a record field to ``Decimal``.

    Accepts ``Decimal``, ``int``, ``float`` (via its shortest repr) and
    numeric-looking strings. Raises ``ValueError`` for anything else,
    including empty strings and ``None``.
    """

    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, int):
        d = Decimal(value)
    elif isinstance(value, float):
        d = Decimal(repr(value))
    elif isinstance(value, str) and looks_numeric(value):
        d = Decimal(value.strip())
    else:
        raise ValueError(f"not a number: {value!r}")
    if not d.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return d


def round_cents(d: Decimal) -> Decimal:
    try:
        return d.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        # Exponent too large for the active context.
        raise ValueError(f"amount out of range: {d!r}") from exc


def balance_matches(start: object, mutation: object, end: object) -> bool:
    """True when ``round(start + mutation, 2) == round(end, 2)``.

    Raises ``ValueError`` when any operand cannot be coerced.
    """

    expected = round_cents(to_decimal(start) + to_decimal(mutation))
    return expected == round_cents(to_decimal(end))


__all__ = ["CENTS", "balance_matches", "coerce_cell", "looks_numeric", "round_cents", "to_decimal"]
