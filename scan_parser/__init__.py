"""
Jewellery Scanner String Parser

Recovers item code, gross/stone/net weight and piece count from a single
undelimited scanner string, enforcing GW == SW + NW with exact fixed-point
arithmetic.
"""

from .core.models import ParsedItem, ParseStatus
from .core.parser import parse_scanner_string, parse_scanner_strings
from .core.summary import BatchSummary, summarize_items, valid_items, issue_items
from .validators.validators import (
    revalidate_item,
    validate_weights,
    to_fixed_point,
    is_valid_decimal,
)
from .formatters.json_formatter import (
    item_to_dict,
    format_item_json,
    parse_scan_to_json,
    parse_scan_to_dict,
)

__version__ = "1.0.0"
__all__ = [
    "ParsedItem",
    "ParseStatus",
    "parse_scanner_string",
    "parse_scanner_strings",
    "BatchSummary",
    "summarize_items",
    "valid_items",
    "issue_items",
    "revalidate_item",
    "validate_weights",
    "to_fixed_point",
    "is_valid_decimal",
    "item_to_dict",
    "format_item_json",
    "parse_scan_to_json",
    "parse_scan_to_dict",
]
