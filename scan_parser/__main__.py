"""
CLI interface for the Jewellery Scan Parser.

Usage:
    python -m scan_parser "<scanner string>" ["<scanner string>" ...] [options]
    python -m scan_parser --input scans.txt [options]
    cat scans.txt | python -m scan_parser [options]

Options:
    --input FILE          Read scanner strings from a file, one per line
    --json                Output as JSON
    --only-valid          Only output VALID items
    --export FORMAT       Write a csv, excel or pdf report
    --output NAME         Report file name (inside the exports directory)
    --exports-dir DIR     Override the exports directory
    --log-level LEVEL     Log level for stderr diagnostics

Exit code is 0 when every item is VALID, 1 otherwise.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from .config import configure_logging
from .core.models import ParsedItem
from .core.parser import parse_scanner_strings
from .core.summary import BatchSummary, summarize_items
from .formatters.json_formatter import format_items_json, format_weight
from .reports import REPORT_FORMATS, write_report

logger = structlog.get_logger()


def format_item(raw: str, item: ParsedItem, indent: int = 2) -> str:
    """Format a single parsed item for display."""
    prefix = " " * indent
    lines = [
        f"Input: {raw!r}",
        f"{prefix}Status: {item.status.value}",
        f"{prefix}Code: {item.code or '-'}",
    ]

    if item.gross_weight is not None:
        lines.extend([
            f"{prefix}Gross Weight: {format_weight(item.gross_weight)}",
            f"{prefix}Stone Weight: {format_weight(item.stone_weight)}",
            f"{prefix}Net Weight: {format_weight(item.net_weight)}",
        ])

    if item.pieces is not None:
        lines.append(f"{prefix}Pieces: {item.pieces}")

    if item.error:
        lines.append(f"{prefix}Error: {item.error}")

    return '\n'.join(lines)


def format_summary(summary: BatchSummary) -> str:
    """Format batch totals for display."""
    return '\n'.join([
        "=" * 60,
        f"Items: {summary.total}  Valid: {summary.valid_count}  "
        f"Mistake: {summary.mistake_count}  Invalid: {summary.invalid_count}",
        f"Totals (valid only): GW {format_weight(summary.gross_weight)}  "
        f"SW {format_weight(summary.stone_weight)}  "
        f"NW {format_weight(summary.net_weight)}  PCS {summary.pieces}",
        "=" * 60,
    ])


def read_scanner_strings(path: Optional[str], values: List[str]) -> List[str]:
    """Collect scanner strings from arguments, a file, or stdin."""
    if values:
        return list(values)

    if path:
        text = Path(path).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    return [line.strip() for line in text.splitlines() if line.strip()]


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='scan_parser',
        description='Parse jewellery scanner strings into code, weights and piece count'
    )

    parser.add_argument(
        'scans',
        nargs='*',
        help='Scanner strings to parse (reads --input or stdin when omitted)'
    )

    parser.add_argument(
        '--input',
        default=None,
        help='Text file with one scanner string per line'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--only-valid',
        action='store_true',
        help='Only output items whose weights balance'
    )

    parser.add_argument(
        '--export',
        choices=REPORT_FORMATS,
        default=None,
        help='Write a report in the given format'
    )

    parser.add_argument(
        '--output',
        default=None,
        help='Report file name (defaults to a timestamped name)'
    )

    parser.add_argument(
        '--exports-dir',
        default=None,
        help='Directory for reports (defaults to SCAN_PARSER_EXPORTS_DIR)'
    )

    parser.add_argument(
        '--log-level',
        default=None,
        help='Log level for diagnostics on stderr'
    )

    args = parser.parse_args(argv)

    if args.scans and args.input:
        parser.error("pass scanner strings or --input, not both")

    configure_logging(level=args.log_level)

    try:
        raws = read_scanner_strings(args.input, args.scans)
    except OSError as exc:
        logger.error("input_read_failed", path=args.input, error=str(exc))
        print(f"Error: cannot read input: {exc}", file=sys.stderr)
        return 1

    items = parse_scanner_strings(raws)
    summary = summarize_items(items)
    logger.info(
        "batch_parsed",
        total=summary.total,
        valid=summary.valid_count,
        mistake=summary.mistake_count,
        invalid=summary.invalid_count,
    )

    shown = [
        (raw, item) for raw, item in zip(raws, items)
        if item.is_valid or not args.only_valid
    ]

    if args.json:
        print(format_items_json(
            [item for _, item in shown],
            raws=[raw for raw, _ in shown],
        ))
    else:
        for raw, item in shown:
            print(format_item(raw, item))
            print()
        print(format_summary(summary))

    if args.export:
        exports_dir = Path(args.exports_dir) if args.exports_dir else None
        try:
            path = write_report(items, raws, args.export, filename=args.output, exports_dir=exports_dir)
        except OSError as exc:
            logger.error("report_export_failed", format=args.export, error=str(exc))
            print(f"Error: cannot write report: {exc}", file=sys.stderr)
            return 1
        print(f"Report written: {path}", file=sys.stderr)

    return 0 if summary.valid_count == summary.total else 1


if __name__ == '__main__':
    sys.exit(main())
