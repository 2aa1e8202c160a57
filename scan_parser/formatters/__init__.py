"""
Output formatters for the jewellery scan parser.
"""

from .json_formatter import (
    item_to_dict,
    format_item_json,
    format_items_json,
    parse_scan_to_json,
    parse_scan_to_dict,
)

__all__ = [
    "item_to_dict",
    "format_item_json",
    "format_items_json",
    "parse_scan_to_json",
    "parse_scan_to_dict",
]
