#!/usr/bin/env python3
"""
Data Comparison Tool

Compares two datasets (JSON, CSV, Excel, Java source, plain text) and
reports which elements were added, removed, modified or left unchanged.

Each input is sniffed for its format, parsed into a normalized value
(an ordered list of records or a keyed mapping), and the two values are
compared in a single pass: by position for lists and lines, by key for
mappings. There is no alignment step, so an insertion near the top of a
list shows up as a run of modifications.

Usage:
    python data_compare.py left.json right.json
    python data_compare.py old.csv new.xlsx --output report.md
"""

import argparse
import io
import json
import math
import sys
import warnings
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class ComparisonConfig:
    """Configuration for a command line comparison run."""
    file_left: str
    file_right: str

    # Format overrides (None = detect)
    left_format: str | None = None
    right_format: str | None = None

    # Output
    output_file: str | None = None
    export_dir: str = "."
    max_preview: int = 10


# =============================================================================
# Errors
# =============================================================================

class DataCompareError(ValueError):
    """Base class for every error surfaced to the user."""
    title = "Comparison failed"


class InputMissingError(DataCompareError):
    title = "Missing data"


class ParseError(DataCompareError):
    """Input could not be parsed in its detected (or chosen) format."""
    title = "Invalid data format"

    def __init__(self, fmt: "Format", message: str):
        self.format = fmt
        super().__init__(f"Invalid {fmt.value.upper()} input: {message}")


class ShapeMismatchError(DataCompareError):
    """The two normalized values cannot be compared against each other."""
    title = "Incompatible data"


# =============================================================================
# Data Structures
# =============================================================================

class Format(str, Enum):
    JSON = "json"
    CSV = "csv"
    EXCEL = "excel"
    JAVA = "java"
    TEXT = "text"


# Formats compared line by line regardless of shape
LINE_FORMATS = {Format.JAVA, Format.TEXT}


class ValueKind(str, Enum):
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class ChangeType(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass
class DiffEntry:
    """One classified element. `position` is an index (int) or a key (str)."""
    change: ChangeType
    position: int | str
    value: Any = None
    left: Any = None
    right: Any = None

    def to_dict(self) -> dict:
        label = "index" if isinstance(self.position, int) else "key"
        if self.change is ChangeType.MODIFIED:
            return {label: self.position, "left": self.left, "right": self.right}
        return {label: self.position, "value": self.value}


@dataclass
class ComparisonResult:
    added: list[DiffEntry] = field(default_factory=list)
    removed: list[DiffEntry] = field(default_factory=list)
    modified: list[DiffEntry] = field(default_factory=list)
    unchanged: list[DiffEntry] = field(default_factory=list)

    left_format: Format | None = None
    right_format: Format | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.added) + len(self.removed) + len(self.modified) + len(self.unchanged)

    @property
    def difference_count(self) -> int:
        return len(self.added) + len(self.removed) + len(self.modified)

    @property
    def difference_rate(self) -> float:
        """Percentage of elements that differ, to one decimal."""
        if self.total == 0:
            return 0.0
        return round(self.difference_count / self.total * 100, 1)

    @property
    def unchanged_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return round(len(self.unchanged) / self.total * 100, 1)

    def summary(self) -> dict:
        return {
            "total": self.total,
            "added": len(self.added),
            "modified": len(self.modified),
            "removed": len(self.removed),
            "unchanged": len(self.unchanged),
        }

    def to_dict(self) -> dict:
        return {
            "added": [e.to_dict() for e in self.added],
            "modified": [e.to_dict() for e in self.modified],
            "removed": [e.to_dict() for e in self.removed],
            "unchanged": [e.to_dict() for e in self.unchanged],
            "total": self.total,
        }


# =============================================================================
# Values
# =============================================================================

def normalize_value(value: Any) -> Any:
    """
    Map a parsed value onto plain Python values of a closed set of kinds.

    numpy/pandas scalars become builtins, NaN and infinities become None,
    integral floats become ints (so 1 and 1.0 serialize identically),
    dates become ISO strings and mapping keys become strings.
    """
    if value is None or value is pd.NA or value is pd.NaT:
        return None
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        num = float(value)
        if math.isnan(num) or math.isinf(num):
            return None
        if num.is_integer() and abs(num) < 2 ** 53:
            return int(num)
        return num
    if isinstance(value, str):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [normalize_value(v) for v in value]
    if isinstance(value, dict):
        return {str(k): normalize_value(v) for k, v in value.items()}
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def value_kind(value: Any) -> ValueKind:
    """Classify an already normalized value."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    raise TypeError(f"Value is not normalized: {type(value).__name__}")


def canonical_serialize(value: Any) -> str:
    """Key-order independent encoding used only for equality checks."""
    try:
        return json.dumps(
            normalize_value(value),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        )
    except RecursionError as e:
        raise DataCompareError("Value is nested too deeply to compare") from e


def reject_json_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def load_strict_json(text: str) -> Any:
    """json.loads without the NaN/Infinity extensions."""
    return json.loads(text, parse_constant=reject_json_constant)


def values_equal(a: Any, b: Any) -> bool:
    return canonical_serialize(a) == canonical_serialize(b)


# =============================================================================
# Format Detection
# =============================================================================

EXTENSION_FORMATS = {
    '.xlsx': Format.EXCEL,
    '.xls': Format.EXCEL,
    '.csv': Format.CSV,
    '.java': Format.JAVA,
}

JAVA_MARKERS = ("class ", "public ", "private ")


def detect_format(text: str, filename: str | None = None) -> Format:
    """Guess the format of an input. Never fails; falls back to text."""
    if filename:
        fmt = EXTENSION_FORMATS.get(Path(filename).suffix.lower())
        if fmt is not None:
            return fmt

    stripped = text.strip()
    if stripped.startswith(("{", "[")):
        return Format.JSON
    if "," in text and "\n" in text:
        return Format.CSV
    if any(marker in text for marker in JAVA_MARKERS):
        return Format.JAVA
    return Format.TEXT


# =============================================================================
# Parsers
# =============================================================================

def validate_column_names(columns: list[str], source: str) -> None:
    """Warn about header rows that look wrong."""
    empty = [c for c in columns if not str(c).strip() or str(c).startswith("Unnamed:")]
    numeric = [c for c in columns if str(c).strip().replace(".", "", 1).isdigit()]

    # pandas renames repeated headers to "name.1", "name.2", ...
    names = set(str(c) for c in columns)
    duplicated = [
        c for c in columns
        if "." in str(c) and str(c).rsplit(".", 1)[1].isdigit() and str(c).rsplit(".", 1)[0] in names
    ]

    if not (empty or numeric or duplicated):
        return

    print(f"  ⚠ Column name warnings for {source}:")
    if empty:
        print(f"    - Empty names: {len(empty)}")
    if duplicated:
        print(f"    - Duplicated names: {len(duplicated)} (e.g., {duplicated[:3]})")
    if numeric:
        print(f"    - Numeric names: {len(numeric)} (e.g., {numeric[:3]})")
    if columns and len(numeric) == len(columns):
        print(f"    ❌ ALL columns are numbers - first row is likely DATA, not headers!")


def dataframe_to_records(df: pd.DataFrame) -> list[dict]:
    return [normalize_value(row) for row in df.to_dict(orient="records")]


class FormatParser:
    """Turns raw input into a normalized value."""
    format: Format

    def parse(self, content: str | bytes) -> Any:
        raise NotImplementedError

    def fail(self, message: str) -> ParseError:
        return ParseError(self.format, message)


class JsonParser(FormatParser):
    format = Format.JSON

    def parse(self, content):
        try:
            return normalize_value(load_strict_json(content))
        except json.JSONDecodeError as e:
            raise self.fail(f"{e.msg} (line {e.lineno}, column {e.colno})") from e
        except ValueError as e:
            raise self.fail(str(e)) from e
        except RecursionError as e:
            raise self.fail("nesting too deep") from e


class CsvParser(FormatParser):
    format = Format.CSV

    def parse(self, content):
        try:
            with warnings.catch_warnings():
                # Extra trailing fields are dropped with a ParserWarning
                warnings.simplefilter("error", pd.errors.ParserWarning)
                df = pd.read_csv(
                    io.StringIO(content),
                    dtype=str,
                    keep_default_na=False,
                    skip_blank_lines=True,
                    index_col=False,
                )
        except pd.errors.EmptyDataError as e:
            raise self.fail("no header row found") from e
        except pd.errors.ParserError as e:
            raise self.fail(str(e).strip()) from e
        except pd.errors.ParserWarning as e:
            raise self.fail(f"row has more fields than the header ({e})") from e

        # Missing fields are the only source of NaN with keep_default_na=False
        short_rows = df.index[df.isna().any(axis=1)]
        if len(short_rows):
            raise self.fail(f"record {short_rows[0] + 1} has fewer fields than the header")

        validate_column_names(list(df.columns), "CSV input")
        return dataframe_to_records(df)


class ExcelParser(FormatParser):
    """Reads the first sheet of an xlsx/xls workbook."""
    format = Format.EXCEL

    def parse(self, content):
        if isinstance(content, str):
            # Binary string: one char per byte
            content = content.encode("latin-1")

        try:
            df = pd.read_excel(io.BytesIO(content), sheet_name=0, dtype=object)
        except Exception as e:
            # openpyxl, xlrd and zipfile each raise their own types
            raise self.fail(f"could not read workbook ({e})") from e

        df = df.dropna(how="all")
        validate_column_names([str(c) for c in df.columns], "Excel input")
        return dataframe_to_records(df)


class LineParser(FormatParser):
    """One record per non-blank line, numbered by its line in the input."""

    def parse(self, content):
        return [
            {"lineNumber": number, "content": line.strip()}
            for number, line in enumerate(content.splitlines(), start=1)
            if line.strip()
        ]


class JavaLineParser(LineParser):
    format = Format.JAVA


class TextLineParser(LineParser):
    format = Format.TEXT


PARSERS: dict[Format, FormatParser] = {
    Format.JSON: JsonParser(),
    Format.CSV: CsvParser(),
    Format.EXCEL: ExcelParser(),
    Format.JAVA: JavaLineParser(),
    Format.TEXT: TextLineParser(),
}


def get_parser(fmt: Format) -> FormatParser:
    return PARSERS[Format(fmt)]


def parse_input(content: str | bytes, fmt: Format) -> Any:
    """Parse raw content in the given format."""
    fmt = Format(fmt)
    if isinstance(content, bytes) and fmt is not Format.EXCEL:
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(fmt, "input is not valid UTF-8 text") from e
    return get_parser(fmt).parse(content)


# =============================================================================
# Comparison
# =============================================================================

def compare_sequences(left: list, right: list, result: ComparisonResult) -> None:
    """Positional comparison. No alignment: index i is matched with index i."""
    for i, item in enumerate(left):
        if i < len(right):
            if values_equal(item, right[i]):
                result.unchanged.append(DiffEntry(ChangeType.UNCHANGED, i, value=item))
            else:
                result.modified.append(DiffEntry(ChangeType.MODIFIED, i, left=item, right=right[i]))
        else:
            result.removed.append(DiffEntry(ChangeType.REMOVED, i, value=item))

    for i in range(len(left), len(right)):
        result.added.append(DiffEntry(ChangeType.ADDED, i, value=right[i]))


def compare_mappings(left: dict, right: dict, result: ComparisonResult) -> None:
    """Key-based comparison over left keys, then keys only seen on the right."""
    all_keys = list(left) + [k for k in right if k not in left]

    for key in all_keys:
        if key not in left:
            result.added.append(DiffEntry(ChangeType.ADDED, key, value=right[key]))
        elif key not in right:
            result.removed.append(DiffEntry(ChangeType.REMOVED, key, value=left[key]))
        elif not values_equal(left[key], right[key]):
            result.modified.append(DiffEntry(ChangeType.MODIFIED, key, left=left[key], right=right[key]))
        else:
            result.unchanged.append(DiffEntry(ChangeType.UNCHANGED, key, value=left[key]))


def compare(left: Any, right: Any, left_format: Format, right_format: Format) -> ComparisonResult:
    """Classify every element of two normalized values."""
    left_format, right_format = Format(left_format), Format(right_format)
    result = ComparisonResult(left_format=left_format, right_format=right_format)

    if left_format != right_format:
        result.warnings.append(
            f"Formats differ ({left_format.value} vs {right_format.value}); comparing by shape"
        )

    if left_format in LINE_FORMATS or right_format in LINE_FORMATS:
        left = left if isinstance(left, list) else [left]
        right = right if isinstance(right, list) else [right]

    if isinstance(left, list) and isinstance(right, list):
        compare_sequences(left, right, result)
    elif isinstance(left, dict) and isinstance(right, dict):
        compare_mappings(left, right, result)
    else:
        raise ShapeMismatchError(
            f"Cannot compare {describe_shape(left)} with {describe_shape(right)}; "
            f"both sides must be arrays or both must be objects"
        )

    return result


def describe_shape(value: Any) -> str:
    kind = value_kind(normalize_value(value))
    return {
        ValueKind.SEQUENCE: "an array",
        ValueKind.MAPPING: "an object",
        ValueKind.NULL: "null",
    }.get(kind, f"a {kind.value}")


# =============================================================================
# Report Generation
# =============================================================================

def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(now: datetime) -> str:
    """ISO 8601 with milliseconds and a Z suffix."""
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def report_filename(now: datetime) -> str:
    millis = int(now.timestamp()) * 1000 + now.microsecond // 1000
    return f"comparison_report_{millis}.json"


def build_report(result: ComparisonResult, now: datetime | None = None) -> dict:
    now = now or utc_now()
    return {
        "timestamp": format_timestamp(now),
        "summary": result.summary(),
        "details": result.to_dict(),
    }


def export_report(result: ComparisonResult, directory: str | Path = ".",
                  now: datetime | None = None) -> Path:
    """Write the JSON report and return its path."""
    now = now or utc_now()
    path = Path(directory) / report_filename(now)
    try:
        document = json.dumps(build_report(result, now), indent=2, ensure_ascii=False)
    except RecursionError as e:
        raise DataCompareError("Result is nested too deeply to export") from e
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document, encoding="utf-8")
    return path


def format_number(n: int) -> str:
    """Format number with commas."""
    return f"{n:,}"


def format_cell(value: Any, limit: int = 60) -> str:
    """Compact one-line rendering of a value for a markdown table cell."""
    text = json.dumps(value, ensure_ascii=False)
    if len(text) > limit:
        text = text[:limit - 3] + "..."
    return text.replace("|", "\\|")


def overall_verdict(result: ComparisonResult) -> str:
    if result.difference_count == 0:
        return "IDENTICAL"
    return "DIFFERENT"


def generate_report(result: ComparisonResult, max_preview: int = 10,
                    now: datetime | None = None) -> str:
    """Generate a markdown report."""
    now = now or utc_now()
    lines = []

    # Header
    lines.append("# Data Comparison Report")
    lines.append("")
    lines.append(f"**Generated:** {format_timestamp(now)}")
    lines.append("")

    # Formats
    lines.append("## 1. Inputs")
    lines.append("")
    lines.append("| Property | Left | Right |")
    lines.append("|----------|------|-------|")
    left_fmt = result.left_format.value if result.left_format else "-"
    right_fmt = result.right_format.value if result.right_format else "-"
    lines.append(f"| Format | {left_fmt} | {right_fmt} |")
    lines.append("")

    for warning in result.warnings:
        lines.append(f"⚠ {warning}")
        lines.append("")

    # Summary
    lines.append("## 2. Summary")
    lines.append("")
    lines.append("| Added | Removed | Modified | Unchanged | Total |")
    lines.append("|-------|---------|----------|-----------|-------|")
    lines.append(
        f"| {format_number(len(result.added))} | {format_number(len(result.removed))} | "
        f"{format_number(len(result.modified))} | {format_number(len(result.unchanged))} | "
        f"{format_number(result.total)} |"
    )
    lines.append("")
    lines.append(f"- Difference rate: **{result.difference_rate:.1f}%**")
    lines.append(f"- Unchanged rate: **{result.unchanged_rate:.1f}%**")
    lines.append("")

    # Details
    lines.append("## 3. Differences")
    lines.append("")

    for title, entries in (("Added", result.added), ("Removed", result.removed)):
        lines.append(f"### {title} ({format_number(len(entries))})")
        lines.append("")
        if entries:
            lines.append("| Position | Value |")
            lines.append("|----------|-------|")
            for entry in entries:
                lines.append(f"| `{entry.position}` | `{format_cell(entry.value)}` |")
        else:
            lines.append("_None_")
        lines.append("")

    lines.append(f"### Modified ({format_number(len(result.modified))})")
    lines.append("")
    if result.modified:
        lines.append("| Position | Left | Right |")
        lines.append("|----------|------|-------|")
        for entry in result.modified:
            lines.append(f"| `{entry.position}` | `{format_cell(entry.left)}` | `{format_cell(entry.right)}` |")
    else:
        lines.append("_None_")
    lines.append("")

    lines.append(f"### Unchanged ({format_number(len(result.unchanged))})")
    lines.append("")
    if result.unchanged:
        lines.append("| Position | Value |")
        lines.append("|----------|-------|")
        for entry in result.unchanged[:max_preview]:
            lines.append(f"| `{entry.position}` | `{format_cell(entry.value)}` |")
        if len(result.unchanged) > max_preview:
            lines.append("")
            lines.append(f"Showing first {max_preview} of {format_number(len(result.unchanged))} unchanged entries")
    else:
        lines.append("_None_")
    lines.append("")

    # Verdict
    lines.append("## 4. Summary Verdict")
    lines.append("")
    lines.append(f"### Overall: **{overall_verdict(result)}**")
    lines.append("")

    return "\n".join(lines)


def generate_stdout_summary(result: ComparisonResult) -> str:
    """Generate a concise summary for stdout."""
    lines = []
    lines.append("=" * 60)
    lines.append("DATA COMPARISON SUMMARY")
    lines.append("=" * 60)
    lines.append("")
    lines.append(f"Formats:    {result.left_format.value} vs {result.right_format.value}")
    lines.append(f"Added:      {format_number(len(result.added))}")
    lines.append(f"Removed:    {format_number(len(result.removed))}")
    lines.append(f"Modified:   {format_number(len(result.modified))}")
    lines.append(f"Unchanged:  {format_number(len(result.unchanged))}")
    lines.append(f"Total:      {format_number(result.total)}")
    lines.append("")
    lines.append("-" * 60)
    lines.append(f"OVERALL: {overall_verdict(result)} ({result.difference_rate:.1f}% differ)")
    lines.append("-" * 60)

    for warning in result.warnings:
        lines.append("")
        lines.append(f"⚠ {warning}")

    return "\n".join(lines)


# =============================================================================
# Session
# =============================================================================

@dataclass
class DataSource:
    """One input buffer: pasted text or the contents of a file."""
    content: str | bytes = ""
    filename: str | None = None
    format_override: Format | None = None
    generation: int = 0

    def is_empty(self) -> bool:
        if isinstance(self.content, bytes):
            return len(self.content) == 0
        return not self.content.strip()

    def resolve_format(self) -> Format:
        if self.format_override is not None:
            return self.format_override
        text = self.content
        if isinstance(text, bytes):
            text = text.decode("latin-1")
        return detect_format(text, self.filename)


@dataclass(frozen=True)
class ReadTicket:
    side: Side
    generation: int


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    is_error: bool = False


def read_input(path: str | Path) -> str | bytes:
    """Read a file as text, or as bytes for Excel workbooks."""
    path = Path(path)
    fmt = EXTENSION_FORMATS.get(path.suffix.lower())
    if fmt is Format.EXCEL:
        return path.read_bytes()
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(fmt or Format.TEXT, f"{path.name} is not valid UTF-8 text") from e


def input_stats(content: str | bytes) -> dict:
    """Line and character counts shown under an input buffer."""
    if isinstance(content, bytes):
        return {"lines": 0, "characters": len(content)}
    return {"lines": len(content.split("\n")), "characters": len(content)}


class ComparisonSession:
    """
    The two input buffers of an interactive session and the last result.

    Failed comparisons never replace the last successful result; the
    caller gets a Notification describing what went wrong instead.
    """

    def __init__(self):
        self.sources = {Side.LEFT: DataSource(), Side.RIGHT: DataSource()}
        self.result: ComparisonResult | None = None

    def source(self, side: Side) -> DataSource:
        return self.sources[Side(side)]

    def set_input(self, side: Side, content: str | bytes, filename: str | None = None) -> None:
        """Replace a buffer. Any format override is dropped with the old input."""
        old = self.source(side)
        self.sources[Side(side)] = DataSource(
            content=content,
            filename=filename,
            generation=old.generation + 1,
        )

    def clear(self, side: Side) -> None:
        self.set_input(side, "")

    def set_format(self, side: Side, fmt: Format | None) -> None:
        self.source(side).format_override = Format(fmt) if fmt is not None else None

    def format_input(self, side: Side) -> bool:
        """Pretty-print a JSON buffer in place. Returns False if it is not JSON."""
        source = self.source(side)
        if isinstance(source.content, bytes) or source.is_empty():
            return False
        try:
            formatted = json.dumps(load_strict_json(source.content), indent=2, ensure_ascii=False)
        except (ValueError, RecursionError):
            return False
        source.content = formatted
        source.generation += 1
        return True

    def input_stats(self, side: Side) -> dict:
        return input_stats(self.source(side).content)

    # File reads are the only step that may complete late
    def begin_read(self, side: Side) -> ReadTicket:
        return ReadTicket(Side(side), self.source(side).generation)

    def complete_read(self, ticket: ReadTicket, content: str | bytes,
                      filename: str | None = None) -> bool:
        """Commit a finished read unless newer input arrived meanwhile."""
        if self.source(ticket.side).generation != ticket.generation:
            return False
        self.set_input(ticket.side, content, filename)
        return True

    def load_file(self, side: Side, path: str | Path) -> bool:
        ticket = self.begin_read(side)
        return self.complete_read(ticket, read_input(path), Path(path).name)

    def run(self) -> ComparisonResult:
        """Detect, parse and compare both buffers. Raises on failure."""
        left, right = self.source(Side.LEFT), self.source(Side.RIGHT)
        if left.is_empty() or right.is_empty():
            raise InputMissingError("Please provide data for both the left and the right side")

        left_format = left.resolve_format()
        right_format = right.resolve_format()

        left_value = parse_input(left.content, left_format)
        right_value = parse_input(right.content, right_format)

        return compare(left_value, right_value, left_format, right_format)

    def compare(self) -> Notification:
        try:
            result = self.run()
        except DataCompareError as e:
            return Notification(title=e.title, message=str(e), is_error=True)

        self.result = result
        return Notification(
            title="Comparison complete",
            message=f"Found {result.difference_count} differences",
        )

    def export(self, directory: str | Path = ".", now: datetime | None = None) -> Path:
        if self.result is None:
            raise InputMissingError("Nothing to export; run a comparison first")
        return export_report(self.result, directory, now)


# =============================================================================
# Main Comparison Logic
# =============================================================================

def run_comparison(config: ComparisonConfig) -> ComparisonResult:
    """Load both files and compare them."""
    session = ComparisonSession()

    print(f"Loading {config.file_left}...")
    session.load_file(Side.LEFT, config.file_left)
    session.set_format(Side.LEFT, config.left_format)

    print(f"Loading {config.file_right}...")
    session.load_file(Side.RIGHT, config.file_right)
    session.set_format(Side.RIGHT, config.right_format)

    left_format = session.source(Side.LEFT).resolve_format()
    right_format = session.source(Side.RIGHT).resolve_format()
    print(f"  Left:  {left_format.value}")
    print(f"  Right: {right_format.value}")

    print("Comparing...")
    result = session.run()
    for warning in result.warnings:
        print(f"  ⚠ Warning: {warning}")

    return result


# =============================================================================
# CLI
# =============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Compare two data files (JSON, CSV, Excel, Java, text).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python data_compare.py before.json after.json
  python data_compare.py old.csv new.xlsx --output report.md
  python data_compare.py A.java B.java --export-dir reports/
        """
    )

    formats = [f.value for f in Format]
    parser.add_argument("file_left", help="Path to the left (original) file")
    parser.add_argument("file_right", help="Path to the right (changed) file")
    parser.add_argument("--left-format", choices=formats,
                        help="Override the detected format of the left file")
    parser.add_argument("--right-format", choices=formats,
                        help="Override the detected format of the right file")
    parser.add_argument("--output", "-o", help="Output file for the markdown report")
    parser.add_argument("--export-dir", default=".",
                        help="Directory for the JSON report (default: current directory)")
    parser.add_argument("--max-preview", type=int, default=10,
                        help="Unchanged entries listed in the markdown report (default: 10)")

    args = parser.parse_args()

    config = ComparisonConfig(
        file_left=args.file_left,
        file_right=args.file_right,
        left_format=args.left_format,
        right_format=args.right_format,
        output_file=args.output,
        export_dir=args.export_dir,
        max_preview=args.max_preview,
    )

    try:
        result = run_comparison(config)

        print()
        print(generate_stdout_summary(result))

        output_path = config.output_file or "comparison_report.md"
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(generate_report(result, config.max_preview))
        json_path = export_report(result, config.export_dir)

        print()
        print(f"Detailed report written to: {output_path}")
        print(f"JSON report written to: {json_path}")

        sys.exit(0 if result.difference_count == 0 else 1)

    except (DataCompareError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
