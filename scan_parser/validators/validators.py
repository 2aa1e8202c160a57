"""
Weight Validation Functions

Implements exact validation for jewellery weight fields:
- Decimal syntax check (one dot, 1-3 fractional digits)
- Fixed-point conversion at scale 1000 (grams to milligrams)
- Weight equation check: GW == SW + NW
- Re-validation of manually edited rows

All comparisons are done on integers, so 12.500 and 12.5 compare equal and
no floating point tolerance is ever involved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Union

from ..core.models import (
    MSG_EQUATION_NOT_SATISFIED,
    ParsedItem,
    ParseStatus,
)


# Fixed-point scale: weights carry at most 3 fractional digits
SCALE = 1000
MAX_FRACTION_DIGITS = 3

_DECIMAL_PATTERN = re.compile(r'([0-9]*)\.([0-9]{1,3})')

WeightValue = Union[Decimal, int, float, str]


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


def is_valid_decimal(value: str) -> bool:
    """
    Check whether a weight-block substring is a well formed decimal.

    Rules:
    - exactly one dot
    - integer part empty or digits only
    - fractional part of 1 to 3 digits

    Examples:
        >>> is_valid_decimal("12.500")
        True
        >>> is_valid_decimal(".5")
        True
        >>> is_valid_decimal("12")
        False
        >>> is_valid_decimal("1.2345")
        False
    """
    if not value:
        return False
    return _DECIMAL_PATTERN.fullmatch(value) is not None


def decimal_to_fixed(value: str) -> int:
    """
    Convert a valid decimal string to a fixed-point integer (scale 1000).

    The fractional part is right-padded with zeros to 3 digits and combined
    with the integer part, so the conversion is exact.

    Raises:
        ValueError: If value is not a valid decimal
    """
    match = _DECIMAL_PATTERN.fullmatch(value or '')
    if not match:
        raise ValueError(f"Not a valid decimal: {value!r}")

    integer_part, fraction_part = match.groups()
    return int(integer_part or '0') * SCALE + int(fraction_part.ljust(MAX_FRACTION_DIGITS, '0'))


def fixed_to_decimal(value: int) -> Decimal:
    """Convert a fixed-point integer back to grams, keeping 3 decimal places."""
    return Decimal(value).scaleb(-MAX_FRACTION_DIGITS)


def to_fixed_point(value: WeightValue) -> int:
    """
    Convert an edited weight value to a fixed-point integer.

    Accepts Decimal, int, str or float. Floats go through their shortest
    repr so that 0.1 becomes exactly 100.

    Raises:
        ValueError: If the value is not a finite, non-negative number with
                    at most 3 fractional digits
    """
    if isinstance(value, bool):
        raise ValueError("Weight must be numeric, got a boolean")

    if isinstance(value, float):
        text = repr(value)
    else:
        text = str(value).strip()

    try:
        number = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Weight is not a number: {value!r}") from None

    if not number.is_finite():
        raise ValueError(f"Weight must be finite: {value!r}")
    if number < 0:
        raise ValueError(f"Weight must not be negative: {value!r}")

    scaled = number.scaleb(MAX_FRACTION_DIGITS)
    if scaled != scaled.to_integral_value():
        raise ValueError(
            f"Weight has more than {MAX_FRACTION_DIGITS} decimal places: {value!r}"
        )

    return int(scaled)


def check_weight_equation(
    gross_weight: int,
    stone_weight: Optional[int],
    net_weight: int,
) -> bool:
    """
    Check GW == SW + NW on fixed-point integers.

    A missing stone weight means the 2-number form GW == NW.
    """
    if stone_weight is None:
        return gross_weight == net_weight
    return gross_weight == stone_weight + net_weight


def validate_weights(
    gross_weight: Optional[WeightValue],
    stone_weight: Optional[WeightValue],
    net_weight: Optional[WeightValue],
) -> ValidationResult:
    """
    Validate a set of weights and the weight equation.

    Returns:
        ValidationResult with the fixed-point values in meta
        ('gross_int', 'stone_int', 'net_int') and 'balanced' telling whether
        the equation holds. valid is False only for malformed or missing
        values; an unbalanced but well formed set is valid with
        balanced=False.
    """
    result = ValidationResult(valid=True)

    if gross_weight is None:
        result.errors.append("missing gross weight")
    if net_weight is None:
        result.errors.append("missing net weight")
    if result.errors:
        result.valid = False
        return result

    converted = {}
    for name, value in (
        ("gross", gross_weight),
        ("stone", stone_weight if stone_weight is not None else 0),
        ("net", net_weight),
    ):
        try:
            converted[name] = to_fixed_point(value)
        except ValueError as exc:
            result.errors.append(f"invalid {name} weight: {exc}")

    if result.errors:
        result.valid = False
        return result

    result.meta['gross_int'] = converted["gross"]
    result.meta['stone_int'] = converted["stone"]
    result.meta['net_int'] = converted["net"]
    result.meta['balanced'] = check_weight_equation(
        converted["gross"], converted["stone"], converted["net"]
    )
    return result


def _coerce_weight(value: Optional[WeightValue]) -> Optional[Decimal]:
    """Normalize an edited weight to a 3-place Decimal, or None if unusable."""
    if value is None:
        return None
    try:
        return fixed_to_decimal(to_fixed_point(value))
    except ValueError:
        return None


def _coerce_pieces(value: Any) -> Optional[int]:
    """Accept an int 0-9 or a single-digit string such as "3" from a form."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if len(value) != 1 or value not in "0123456789":
            return None
        return int(value)
    if isinstance(value, int) and 0 <= value <= 9:
        return value
    return None


def revalidate_item(item: ParsedItem, **changes: Any) -> ParsedItem:
    """
    Re-classify a manually edited item with the same fixed-point check the
    parser uses, so edited and freshly parsed rows agree.

    Args:
        item: The item being edited
        **changes: Field overrides (code, gross_weight, stone_weight,
                   net_weight, pieces). Weights may be Decimal, int, float
                   or str; pieces may be an int or a single-digit str.

    Returns:
        A new ParsedItem. Weights are stored as 3-place Decimals and pieces
        as an int; an edited value that cannot be converted is stored as
        None and named in error. VALID items carry no error; MISTAKE and
        INVALID items explain the failure in error.

    Example:
        >>> edited = revalidate_item(item, net_weight="10.000")
        >>> edited.status
        <ParseStatus.VALID: 'VALID'>
    """
    unknown = set(changes) - {"code", "gross_weight", "stone_weight", "net_weight", "pieces"}
    if unknown:
        raise TypeError(f"Unknown ParsedItem fields: {sorted(unknown)}")

    code = changes.get("code", item.code)
    gross_weight = changes.get("gross_weight", item.gross_weight)
    stone_weight = changes.get("stone_weight", item.stone_weight)
    net_weight = changes.get("net_weight", item.net_weight)
    pieces = changes.get("pieces", item.pieces)

    edited = replace(
        item,
        code=code.strip() if isinstance(code, str) else "",
        gross_weight=_coerce_weight(gross_weight),
        stone_weight=_coerce_weight(stone_weight),
        net_weight=_coerce_weight(net_weight),
        pieces=_coerce_pieces(pieces),
    )

    if not edited.code:
        return replace(edited, status=ParseStatus.INVALID, error="missing code")

    if pieces is None:
        return replace(edited, status=ParseStatus.INVALID, error="missing piece count")
    if edited.pieces is None:
        return replace(
            edited,
            status=ParseStatus.INVALID,
            error=f"piece count must be a single digit, got {pieces!r}",
        )

    check = validate_weights(gross_weight, stone_weight, net_weight)
    if not check.valid:
        return replace(edited, status=ParseStatus.INVALID, error="; ".join(check.errors))

    if not check.meta['balanced']:
        return replace(edited, status=ParseStatus.MISTAKE, error=MSG_EQUATION_NOT_SATISFIED)

    return replace(
        edited,
        stone_weight=fixed_to_decimal(check.meta['stone_int']),
        status=ParseStatus.VALID,
        error=None,
    )
