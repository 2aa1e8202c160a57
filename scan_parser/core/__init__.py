"""
Core parsing modules for the jewellery scan parser.
"""

from .models import ParsedItem, ParseStatus
from .extractors import StageResult, extract_code, extract_pieces, clean_weight_block
from .partitions import Partition, generate_partitions, select_partition
from .parser import parse_scanner_string, parse_scanner_strings
from .summary import BatchSummary, summarize_items, valid_items, issue_items

__all__ = [
    "ParsedItem",
    "ParseStatus",
    "StageResult",
    "extract_code",
    "extract_pieces",
    "clean_weight_block",
    "Partition",
    "generate_partitions",
    "select_partition",
    "parse_scanner_string",
    "parse_scanner_strings",
    "BatchSummary",
    "summarize_items",
    "valid_items",
    "issue_items",
]
