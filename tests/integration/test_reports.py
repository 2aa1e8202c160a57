"""
Tests for CSV / Excel / PDF report generation.
"""

import pandas as pd
import pytest
from scan_parser import parse_scanner_strings, revalidate_item, summarize_items
from scan_parser.reports import (
    DETAILED_COLUMNS,
    export_csv,
    summary_dataframe,
    to_dataframe,
    write_report,
)


RAWS = [
    "12.500*2.500*10.0001ABC123",
    "7.2507.2505XYZ9",
    "12.0002.0005.0001ABC",
    "ABCXYZ",
]


@pytest.fixture
def items():
    return parse_scanner_strings(RAWS)


class TestDataFrames:

    def test_detailed_rows(self, items):
        df = to_dataframe(items, RAWS)

        assert list(df.columns) == DETAILED_COLUMNS
        assert len(df) == 4
        assert df.loc[0, "raw"] == RAWS[0]
        assert df.loc[0, "net_weight"] == "10.000"
        assert df.loc[1, "stone_weight"] == "0.000"
        assert df.loc[2, "gross_weight"] == ""
        assert df.loc[3, "error"] == "no digit found for PCS"

    def test_raw_count_must_match(self, items):
        with pytest.raises(ValueError):
            to_dataframe(items, RAWS[:2])

    def test_edited_invalid_row(self, items):
        edited = revalidate_item(items[2], gross_weight="abc", net_weight="10", pieces=1)

        df = to_dataframe([edited], [RAWS[2]])

        assert df.loc[0, "status"] == "INVALID"
        assert df.loc[0, "gross_weight"] == ""
        assert df.loc[0, "net_weight"] == "10.000"

    def test_summary_table(self, items):
        df = summary_dataframe(summarize_items(items))
        values = dict(zip(df["Field"], df["Value"]))

        assert values["Total Items"] == 4
        assert values["Valid"] == 2
        assert values["Total Gross Weight"] == "19.750"
        assert values["Total Net Weight"] == "17.250"
        assert values["Total Pieces"] == 6


class TestExports:

    def test_export_csv(self, items, tmp_path):
        path = export_csv(to_dataframe(items, RAWS), "detailed.csv", exports_dir=tmp_path)

        df = pd.read_csv(path, dtype=str, keep_default_na=False)

        assert path.parent == tmp_path
        assert list(df["code"]) == ["ABC123", "XYZ9", "ABC", "ABCXYZ"]

    def test_excel_sheets(self, items, tmp_path):
        path = write_report(items, RAWS, "excel", filename="report.xlsx", exports_dir=tmp_path)

        sheets = pd.read_excel(path, sheet_name=None, dtype=str)

        assert set(sheets) == {"Detailed", "Summary", "Issues"}
        assert len(sheets["Detailed"]) == 4
        assert list(sheets["Issues"]["status"]) == ["MISTAKE", "INVALID"]
        assert list(sheets["Issues"]["raw"]) == RAWS[2:]

    def test_pdf(self, items, tmp_path):
        path = write_report(items, RAWS, "pdf", filename="report.pdf", exports_dir=tmp_path)

        assert path.read_bytes().startswith(b"%PDF")

    def test_pdf_paginates_long_batches(self, tmp_path):
        raws = ["12.500*2.500*10.0001ABC123"] * 120
        items = parse_scanner_strings(raws)

        path = write_report(items, raws, "pdf", filename="long.pdf", exports_dir=tmp_path)

        assert path.stat().st_size > 0

    def test_default_filename(self, items, tmp_path):
        path = write_report(items, RAWS, "csv", exports_dir=tmp_path)

        assert path.name.startswith("scan_report_")
        assert path.suffix == ".csv"

    def test_exports_dir_is_created(self, items, tmp_path):
        target = tmp_path / "nested" / "exports"

        path = write_report(items, RAWS, "csv", filename="r.csv", exports_dir=target)

        assert path.exists()

    def test_unknown_format(self, items, tmp_path):
        with pytest.raises(ValueError):
            write_report(items, RAWS, "docx", exports_dir=tmp_path)
