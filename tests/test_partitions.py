"""
Tests for weight block partitioning and first-match selection.

Generation order is observable: it decides which split wins when more than
one balances, so it is asserted exactly here.
"""

from scan_parser.core.partitions import Partition, generate_partitions, select_partition


def _splits(partitions):
    return [(p.gw, p.sw, p.nw) for p in partitions]


class TestGeneration:
    """Candidate enumeration."""

    def test_three_part_order(self):
        partitions = generate_partitions("1.01.01.0")

        assert _splits(partitions) == [
            ("1.0", "1.0", "1.0"),
            ("1.0", "1.01", ".0"),
            ("1.01", ".0", "1.0"),
            ("1.01", ".01", ".0"),
        ]

    def test_two_part_order(self):
        partitions = generate_partitions("1.01.0")

        assert _splits(partitions) == [
            ("1.0", None, "1.0"),
            ("1.01", None, ".0"),
        ]
        assert all(p.parts == 2 for p in partitions)
        assert all(p.sw_int == 0 for p in partitions)

    def test_fixed_point_values(self):
        partitions = generate_partitions("12.5002.50010.000")
        first = partitions[0]

        assert (first.gw, first.sw, first.nw) == ("12.5", "002.5", "0010.000")
        assert (first.gw_int, first.sw_int, first.nw_int) == (12500, 2500, 10000)

    def test_no_candidates(self):
        assert generate_partitions("") == []
        assert generate_partitions("1") == []
        assert generate_partitions("12345") == []
        assert generate_partitions("1.2345") == []

    def test_single_decimal_is_not_a_split(self):
        # One number alone never forms a 2-part candidate
        assert generate_partitions("12.5") == []

    def test_fractions_longer_than_three_digits_rejected(self):
        partitions = generate_partitions("1.23451.2345")

        assert partitions == []


class TestSelection:
    """First exact candidate wins."""

    def test_is_exact_three_part(self):
        assert Partition("3.0", "1.0", "2.0", 3000, 1000, 2000).is_exact
        assert not Partition("3.0", "1.0", "2.5", 3000, 1000, 2500).is_exact

    def test_is_exact_two_part(self):
        assert Partition("7.25", None, "07.250", 7250, 0, 7250).is_exact
        assert not Partition("7.2", None, "507.250", 7200, 0, 507250).is_exact

    def test_first_match_wins(self):
        partitions = generate_partitions("12.5002.50010.000")
        exact = [p for p in partitions if p.is_exact]

        assert len(exact) > 1
        assert select_partition(partitions) is exact[0]
        assert (exact[0].gw, exact[0].sw, exact[0].nw) == ("12.5", "002.5", "0010.000")

    def test_first_match_on_ambiguous_block(self):
        partitions = generate_partitions("10.50.510.0")
        best = select_partition(partitions)

        assert (best.gw, best.sw, best.nw) == ("10.5", "0.5", "10.0")

    def test_select_respects_list_order(self):
        a = Partition("2.0", "1.0", "1.0", 2000, 1000, 1000)
        b = Partition("2.0", None, "2.0", 2000, 0, 2000)

        assert select_partition([a, b]) is a
        assert select_partition([b, a]) is b

    def test_nothing_exact(self):
        partitions = generate_partitions("1.01.01.0")

        assert partitions
        assert select_partition(partitions) is None
        assert select_partition([]) is None
