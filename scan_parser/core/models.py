"""
Result types shared by the scan parser, validators and formatters.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class ParseStatus(str, Enum):
    """Classification of a parsed scanner string."""
    VALID = "VALID"        # GW == SW + NW holds exactly
    MISTAKE = "MISTAKE"    # decimals found, equation fails
    INVALID = "INVALID"    # structure cannot be parsed


# Error messages, one per failed stage
MSG_EMPTY_INPUT = "empty scanner string"
MSG_NO_CODE = "no alphabetic character found for CODE"
MSG_NO_PCS = "no digit found for PCS"
MSG_NO_WEIGHT_DATA = "no weight data found"
MSG_EQUATION_NOT_SATISFIED = "valid decimal structure found but weight equation not satisfied"
MSG_NO_DECIMAL_STRUCTURE = "no valid decimal structure found"


@dataclass(frozen=True)
class ParsedItem:
    """
    A jewellery item recovered from one scanner string.

    Weights are grams with 3 decimal places and are only set when status is
    VALID. error is set whenever status is not VALID.
    """
    code: str = ""
    gross_weight: Optional[Decimal] = None
    stone_weight: Optional[Decimal] = None
    net_weight: Optional[Decimal] = None
    pieces: Optional[int] = None
    status: ParseStatus = ParseStatus.INVALID
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status == ParseStatus.VALID
