"""
Report generation utilities (CSV/Excel/PDF) for parsed scan batches.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd
import structlog
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas

from .config import get_settings
from .core.models import ParsedItem
from .core.summary import BatchSummary, summarize_items
from .formatters.json_formatter import format_weight

logger = structlog.get_logger()

REPORT_FORMATS = ("csv", "excel", "pdf")

DETAILED_COLUMNS = [
    "raw",
    "code",
    "gross_weight",
    "stone_weight",
    "net_weight",
    "pieces",
    "status",
    "error",
]
WEIGHT_COLUMNS = ["gross_weight", "stone_weight", "net_weight"]


def ensure_exports_dir(exports_dir: Optional[Path] = None) -> Path:
    path = Path(exports_dir) if exports_dir is not None else get_settings().exports_dir
    path.mkdir(parents=True, exist_ok=True)
    return path


def to_dataframe(items: Sequence[ParsedItem], raws: Optional[Sequence[str]] = None) -> pd.DataFrame:
    if raws is not None and len(raws) != len(items):
        raise ValueError(f"Got {len(raws)} raw strings for {len(items)} items")

    rows: List[Dict[str, object]] = []
    for idx, item in enumerate(items):
        rows.append({
            "raw": raws[idx] if raws is not None else "",
            "code": item.code,
            "gross_weight": format_weight(item.gross_weight) or "",
            "stone_weight": format_weight(item.stone_weight) or "",
            "net_weight": format_weight(item.net_weight) or "",
            "pieces": "" if item.pieces is None else item.pieces,
            "status": item.status.value,
            "error": item.error or "",
        })
    return pd.DataFrame(rows, columns=DETAILED_COLUMNS)


def summary_dataframe(summary: BatchSummary) -> pd.DataFrame:
    """Two-column Field/Value table; weight totals cover VALID items only."""
    rows = [
        ("Total Items", summary.total),
        ("Valid", summary.valid_count),
        ("Mistake", summary.mistake_count),
        ("Invalid", summary.invalid_count),
        ("Total Gross Weight", format_weight(summary.gross_weight)),
        ("Total Stone Weight", format_weight(summary.stone_weight)),
        ("Total Net Weight", format_weight(summary.net_weight)),
        ("Total Pieces", summary.pieces),
    ]
    return pd.DataFrame(rows, columns=["Field", "Value"])


def export_csv(df: pd.DataFrame, filename: str, exports_dir: Optional[Path] = None) -> Path:
    path = ensure_exports_dir(exports_dir) / filename
    df.to_csv(path, index=False)
    logger.info("report_exported", format="csv", path=str(path), rows=len(df))
    return path


def export_excel(
    detailed: pd.DataFrame,
    summary: pd.DataFrame,
    issues: pd.DataFrame,
    filename: str,
    exports_dir: Optional[Path] = None,
) -> Path:
    path = ensure_exports_dir(exports_dir) / filename
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        detailed.to_excel(writer, sheet_name="Detailed", index=False)
        summary.to_excel(writer, sheet_name="Summary", index=False)
        issues.to_excel(writer, sheet_name="Issues", index=False)
    logger.info("report_exported", format="excel", path=str(path), rows=len(detailed))
    return path


def _compute_col_widths(df: pd.DataFrame, width: float, weights: Optional[Dict[str, float]] = None) -> List[float]:
    col_names = list(df.columns)
    if not col_names:
        return []
    max_lens = []
    sample = df.head(50)
    for col in col_names:
        max_len = len(str(col))
        for v in sample[col].tolist():
            max_len = max(max_len, len(str(v)) if v is not None else 0)
        weight = 1.0
        if weights and col in weights:
            weight = max(0.2, weights[col])
        max_lens.append(max_len * weight)
    total = sum(max_lens) or 1
    raw = [width * (l / total) for l in max_lens]
    min_w = width * 0.05
    max_w = width * 0.30
    clamped = [min(max(r, min_w), max_w) for r in raw]
    scale = width / sum(clamped)
    return [w * scale for w in clamped]


def _draw_footer(c: canvas.Canvas, page_width: float, footer_left: str) -> None:
    y = 0.35 * inch
    c.setFont("Helvetica-Oblique", 8)
    c.drawString(0.5 * inch, y, footer_left)
    c.drawRightString(page_width - 0.5 * inch, y, f"Page {c.getPageNumber()}")


def _draw_table(
    c: canvas.Canvas,
    df: pd.DataFrame,
    x: float,
    y: float,
    width: float,
    min_y: float,
    page_size: tuple,
    footer_text: str,
    column_weights: Optional[Dict[str, float]] = None,
    right_align: Optional[List[str]] = None,
    max_chars: Optional[Dict[str, int]] = None,
) -> float:
    if df.empty:
        c.setFont("Helvetica-Oblique", 9)
        c.drawString(x, y, "No data available.")
        return y - 0.25 * inch

    page_width, page_height = page_size
    col_names = list(df.columns)
    col_widths = _compute_col_widths(df, width, column_weights)
    row_height = 0.22 * inch

    right_align = set(right_align or [])
    max_chars = max_chars or {}

    def draw_row(values, y_pos):
        c.setFont("Helvetica", 8.5)
        x_pos = x
        for idx, v in enumerate(values):
            col_name = col_names[idx]
            text = str(v) if v is not None else ""
            limit = max_chars.get(col_name, 30)
            if len(text) > limit:
                text = text[: max(0, limit - 3)] + "..."
            if col_name in right_align:
                c.drawRightString(x_pos + col_widths[idx] - 2, y_pos, text)
            else:
                c.drawString(x_pos, y_pos, text)
            x_pos += col_widths[idx]

    def draw_header(y_pos):
        c.setFillGray(0.9)
        c.rect(x, y_pos - 0.02 * inch, width, row_height, fill=1, stroke=0)
        c.setFillGray(0)
        c.setFont("Helvetica-Bold", 8.5)
        draw_row(col_names, y_pos)
        c.line(x, y_pos - 0.04 * inch, x + width, y_pos - 0.04 * inch)

    draw_header(y)
    y -= row_height

    for row_index, (_, row) in enumerate(df.iterrows()):
        if row_index % 2 == 1:
            c.setFillGray(0.97)
            c.rect(x, y - 0.02 * inch, width, row_height, fill=1, stroke=0)
            c.setFillGray(0)
        draw_row(row.tolist(), y)
        y -= row_height
        if y < min_y:
            _draw_footer(c, page_width, footer_text)
            c.showPage()
            y = page_height - 0.5 * inch
            draw_header(y)
            y -= row_height
    return y


def export_pdf_report(
    report_title: str,
    detailed: pd.DataFrame,
    summary: pd.DataFrame,
    filename: str,
    exports_dir: Optional[Path] = None,
) -> Path:
    path = ensure_exports_dir(exports_dir) / filename
    page_size = landscape(A4)
    width, height = page_size
    c = canvas.Canvas(str(path), pagesize=page_size)
    footer = f"{report_title} | Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}"
    x = 0.5 * inch
    y = height - 0.5 * inch

    c.setFont("Helvetica-Bold", 16)
    c.drawString(x, y, report_title)
    y -= 0.35 * inch

    c.setFont("Helvetica-Bold", 11)
    c.drawString(x, y, "Summary")
    y -= 0.25 * inch
    c.setFont("Helvetica", 9.5)
    for field_name, value in summary.itertuples(index=False):
        c.drawString(x, y, f"{field_name}: {value}")
        y -= 0.2 * inch

    y -= 0.15 * inch
    c.setFont("Helvetica-Bold", 11)
    c.drawString(x, y, "Items")
    y -= 0.3 * inch
    _draw_table(
        c,
        detailed,
        x,
        y,
        width - inch,
        0.6 * inch,
        page_size,
        footer,
        column_weights={"raw": 1.6, "error": 2.0},
        right_align=WEIGHT_COLUMNS + ["pieces"],
        max_chars={"raw": 32, "code": 20, "error": 48},
    )
    _draw_footer(c, width, footer)

    c.save()
    logger.info("report_exported", format="pdf", path=str(path), rows=len(detailed))
    return path


def write_report(
    items: Sequence[ParsedItem],
    raws: Sequence[str],
    fmt: str,
    filename: Optional[str] = None,
    exports_dir: Optional[Path] = None,
) -> Path:
    """
    Write a batch report in csv, excel or pdf format.

    The Excel workbook holds Detailed, Summary and Issues sheets. CSV only
    carries the detailed rows.
    """
    if fmt not in REPORT_FORMATS:
        raise ValueError(f"Unknown report format: {fmt!r} (expected one of {', '.join(REPORT_FORMATS)})")

    extension = {"csv": "csv", "excel": "xlsx", "pdf": "pdf"}[fmt]
    if filename is None:
        filename = f"scan_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.{extension}"

    detailed = to_dataframe(items, raws)
    if fmt == "csv":
        return export_csv(detailed, filename, exports_dir)

    summary = summary_dataframe(summarize_items(items))
    if fmt == "excel":
        issue_rows = [(raw, item) for raw, item in zip(raws, items) if not item.is_valid]
        issues = to_dataframe([item for _, item in issue_rows], [raw for raw, _ in issue_rows])
        return export_excel(detailed, summary, issues, filename, exports_dir)

    return export_pdf_report(get_settings().report_title, detailed, summary, filename, exports_dir)
