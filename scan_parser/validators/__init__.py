"""
Validation modules for the jewellery scan parser.
"""

from .validators import (
    is_valid_decimal,
    decimal_to_fixed,
    fixed_to_decimal,
    to_fixed_point,
    check_weight_equation,
    validate_weights,
    revalidate_item,
    ValidationResult,
    SCALE,
)

__all__ = [
    "is_valid_decimal",
    "decimal_to_fixed",
    "fixed_to_decimal",
    "to_fixed_point",
    "check_weight_equation",
    "validate_weights",
    "revalidate_item",
    "ValidationResult",
    "SCALE",
]
