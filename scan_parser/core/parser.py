"""
Jewellery Scanner String Parser

Recovers code, gross/stone/net weight and piece count from a single
scanner string produced by a QR/barcode decoder or typed by hand.

Pipeline:
1. Code: suffix starting at the first letter
2. PCS: nearest digit before the code
3. Weight block: prefix before PCS, cleaned to digits and dots
4. Partitions: every 3-part / 2-part split into valid decimals
5. Selection: first split satisfying GW == SW + NW (or GW == NW)
6. Status: VALID, MISTAKE or INVALID

The parser never raises. Every input yields a ParsedItem, and failures are
reported through status and error.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .extractors import extract_code, extract_pieces, extract_weight_block
from .models import (
    MSG_EMPTY_INPUT,
    MSG_EQUATION_NOT_SATISFIED,
    MSG_NO_DECIMAL_STRUCTURE,
    ParsedItem,
    ParseStatus,
)
from .partitions import generate_partitions, select_partition
from ..validators.validators import fixed_to_decimal


def parse_scanner_string(scanner_string: Optional[str]) -> ParsedItem:
    """
    Parse one scanner string.

    Args:
        scanner_string: Raw decoded or typed token

    Returns:
        ParsedItem classified as VALID, MISTAKE or INVALID

    Example:
        >>> item = parse_scanner_string("12.500*2.500*10.0001ABC123")
        >>> item.status, item.code, item.pieces
        (<ParseStatus.VALID: 'VALID'>, 'ABC123', 1)
        >>> item.gross_weight, item.stone_weight, item.net_weight
        (Decimal('12.500'), Decimal('2.500'), Decimal('10.000'))
    """
    if scanner_string is None:
        return ParsedItem(error=MSG_EMPTY_INPUT)

    text = str(scanner_string).strip()
    if not text:
        return ParsedItem(error=MSG_EMPTY_INPUT)

    code_result = extract_code(text)
    if not code_result.ok:
        return ParsedItem(error=code_result.error)
    code = code_result.value.code

    pieces_result = extract_pieces(text, code_result.value.start)
    if not pieces_result.ok:
        return ParsedItem(code=code, error=pieces_result.error)
    pieces = pieces_result.value.pieces

    block_result = extract_weight_block(text, pieces_result.value.index)
    if not block_result.ok:
        return ParsedItem(code=code, pieces=pieces, error=block_result.error)

    partitions = generate_partitions(block_result.value)
    best = select_partition(partitions)

    if best is not None:
        return ParsedItem(
            code=code,
            gross_weight=fixed_to_decimal(best.gw_int),
            stone_weight=fixed_to_decimal(best.sw_int),
            net_weight=fixed_to_decimal(best.nw_int),
            pieces=pieces,
            status=ParseStatus.VALID,
        )

    if partitions:
        return ParsedItem(
            code=code,
            status=ParseStatus.MISTAKE,
            error=MSG_EQUATION_NOT_SATISFIED,
        )

    return ParsedItem(code=code, pieces=pieces, error=MSG_NO_DECIMAL_STRUCTURE)


def parse_scanner_strings(scanner_strings: Iterable[Optional[str]]) -> List[ParsedItem]:
    """
    Parse a batch of scanner strings.

    Each element is parsed independently. The result has the same length and
    order as the input, and failures never stop the batch.
    """
    return [parse_scanner_string(s) for s in scanner_strings]
