"""
Batch totals over parsed items.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

from .models import ParsedItem, ParseStatus


@dataclass(frozen=True)
class BatchSummary:
    """Counts per status and exact totals of the VALID items."""
    total: int
    valid_count: int
    mistake_count: int
    invalid_count: int
    gross_weight: Decimal
    stone_weight: Decimal
    net_weight: Decimal
    pieces: int

    @property
    def issue_count(self) -> int:
        return self.mistake_count + self.invalid_count


def valid_items(items: Iterable[ParsedItem]) -> List[ParsedItem]:
    """Items eligible for persistence."""
    return [item for item in items if item.status == ParseStatus.VALID]


def issue_items(items: Iterable[ParsedItem]) -> List[ParsedItem]:
    """Items needing manual correction (MISTAKE and INVALID)."""
    return [item for item in items if item.status != ParseStatus.VALID]


def summarize_items(items: Iterable[ParsedItem]) -> BatchSummary:
    """
    Summarize a batch. Weight and piece totals only include VALID items.
    """
    items = list(items)
    valid = valid_items(items)
    zero = Decimal("0.000")

    return BatchSummary(
        total=len(items),
        valid_count=len(valid),
        mistake_count=sum(1 for item in items if item.status == ParseStatus.MISTAKE),
        invalid_count=sum(1 for item in items if item.status == ParseStatus.INVALID),
        gross_weight=sum((item.gross_weight for item in valid), zero),
        stone_weight=sum((item.stone_weight for item in valid), zero),
        net_weight=sum((item.net_weight for item in valid), zero),
        pieces=sum(item.pieces for item in valid),
    )
