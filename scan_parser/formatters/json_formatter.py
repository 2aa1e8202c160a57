"""
JSON Formatter for the Jewellery Scan Parser

Provides clean JSON output with:
- Human-readable field names
- Weights as fixed 3-decimal strings (no float rounding in transit)
- Status and error message for review screens
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional, Sequence

from ..core.models import ParsedItem


# ParsedItem attribute to human-readable name
FIELD_NAMES = {
    "code": "Code",
    "gross_weight": "Gross Weight",
    "stone_weight": "Stone Weight",
    "net_weight": "Net Weight",
    "pieces": "Pieces",
    "status": "Status",
    "error": "Error",
}


def format_weight(value: Optional[Decimal]) -> Optional[str]:
    """Format a weight as a 3-decimal string, e.g. Decimal('12.5') -> '12.500'."""
    if value is None:
        return None
    return f"{Decimal(value):.3f}"


def item_to_dict(item: ParsedItem, include_raw: Optional[str] = None) -> Dict[str, Any]:
    """
    Convert a ParsedItem to a dictionary with human-readable keys.

    Args:
        item: Parsed item
        include_raw: Optional original scanner string, added as "Raw"

    Returns:
        Dictionary in display order
    """
    output: Dict[str, Any] = {}

    if include_raw is not None:
        output["Raw"] = include_raw

    output[FIELD_NAMES["code"]] = item.code
    output[FIELD_NAMES["gross_weight"]] = format_weight(item.gross_weight)
    output[FIELD_NAMES["stone_weight"]] = format_weight(item.stone_weight)
    output[FIELD_NAMES["net_weight"]] = format_weight(item.net_weight)
    output[FIELD_NAMES["pieces"]] = item.pieces
    output[FIELD_NAMES["status"]] = item.status.value
    output[FIELD_NAMES["error"]] = item.error

    return output


def format_item_json(item: ParsedItem, include_raw: Optional[str] = None) -> str:
    """Format a single ParsedItem as JSON."""
    return json.dumps(item_to_dict(item, include_raw=include_raw), ensure_ascii=False, indent=2)


def format_items_json(
    items: Iterable[ParsedItem],
    raws: Optional[Sequence[str]] = None,
) -> str:
    """
    Format a batch as a JSON array, preserving order.

    When raws is given, each entry starts with its scanner string as "Raw".
    """
    items = list(items)
    if raws is None:
        rows = [item_to_dict(item) for item in items]
    else:
        if len(raws) != len(items):
            raise ValueError(f"Got {len(raws)} raw strings for {len(items)} items")
        rows = [item_to_dict(item, include_raw=raw) for raw, item in zip(raws, items)]
    return json.dumps(rows, ensure_ascii=False, indent=2)


def parse_scan_to_json(scanner_string: str) -> str:
    """
    Parse a scanner string and return clean JSON output.

    Example:
        >>> print(parse_scan_to_json("7.2507.2505XYZ9"))
        {
          "Code": "XYZ9",
          "Gross Weight": "7.250",
          "Stone Weight": "0.000",
          "Net Weight": "7.250",
          "Pieces": 5,
          "Status": "VALID",
          "Error": null
        }
    """
    from ..core.parser import parse_scanner_string

    return format_item_json(parse_scanner_string(scanner_string))


def parse_scan_to_dict(scanner_string: str) -> Dict[str, Any]:
    """Parse a scanner string and return the formatted dictionary."""
    return json.loads(parse_scan_to_json(scanner_string))
