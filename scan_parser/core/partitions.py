"""
Weight Block Partitioning

The cleaned weight block has no delimiters between gross, stone and net
weight, e.g. "12.5002.50010.000". Every way of cutting it into 3 or 2
decimals is enumerated and checked against the weight equation:

    3 parts: GW == SW + NW
    2 parts: GW == NW  (SW = 0)

Generation order is fixed and decides which split wins when several
balance: all 3-part splits (first cut ascending, then second cut
ascending) before all 2-part splits (cut ascending). The first exact
candidate is selected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..validators.validators import decimal_to_fixed, is_valid_decimal


@dataclass(frozen=True)
class Partition:
    """A candidate split of the weight block into GW, SW and NW."""
    gw: str
    sw: Optional[str]  # None for 2-part splits
    nw: str
    gw_int: int
    sw_int: int
    nw_int: int

    @property
    def parts(self) -> int:
        return 2 if self.sw is None else 3

    @property
    def is_exact(self) -> bool:
        if self.sw is None:
            return self.gw_int == self.nw_int
        return self.gw_int == self.sw_int + self.nw_int


def generate_partitions(cleaned: str) -> List[Partition]:
    """
    Enumerate every 3-part and 2-part split whose pieces are all valid
    decimals, in generation order.
    """
    partitions: List[Partition] = []
    n = len(cleaned)

    # 3-part splits: [0, i) [i, j) [j, n)
    for i in range(1, n - 1):
        gw = cleaned[:i]
        if not is_valid_decimal(gw):
            continue
        for j in range(i + 1, n):
            sw = cleaned[i:j]
            nw = cleaned[j:]
            if is_valid_decimal(sw) and is_valid_decimal(nw):
                partitions.append(Partition(
                    gw=gw,
                    sw=sw,
                    nw=nw,
                    gw_int=decimal_to_fixed(gw),
                    sw_int=decimal_to_fixed(sw),
                    nw_int=decimal_to_fixed(nw),
                ))

    # 2-part splits: [0, i) [i, n)
    for i in range(1, n):
        gw = cleaned[:i]
        nw = cleaned[i:]
        if is_valid_decimal(gw) and is_valid_decimal(nw):
            partitions.append(Partition(
                gw=gw,
                sw=None,
                nw=nw,
                gw_int=decimal_to_fixed(gw),
                sw_int=0,
                nw_int=decimal_to_fixed(nw),
            ))

    return partitions


def select_partition(partitions: List[Partition]) -> Optional[Partition]:
    """Return the first exact partition, or None."""
    for partition in partitions:
        if partition.is_exact:
            return partition
    return None
