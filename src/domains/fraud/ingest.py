"""CSV ingest: turn uploaded text into row mappings for the scorer."""

import csv
import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog

from .config import NUMERIC_FEATURES
from .features import coerce_number

logger = structlog.get_logger()

_BOM = "\ufeff"
_NUMERIC_HEADERS = frozenset(NUMERIC_FEATURES)


class IngestError(ValueError):
    """Input file could not be turned into rows."""


@dataclass
class CsvData:
    headers: list[str] = field(default_factory=list)
    rows: list[dict[str, Any]] = field(default_factory=list)
    # Trimmed cell text before coercion, index-aligned with rows
    raw_rows: list[dict[str, str]] = field(default_factory=list)


def _convert_cell(header: str, cell: str) -> Any:
    if header.lower() == "accounts":
        return cell
    if header in _NUMERIC_HEADERS:
        return coerce_number(cell)
    return cell


def parse_csv_text(text: str) -> CsvData:
    """Parse CSV text with a header line.

    Schema numeric columns become floats (unparsable cells become 0); the
    account column and any unknown columns stay strings. Blank lines are
    skipped and short lines are padded with empty cells. The uncoerced cell
    text is kept in ``raw_rows`` for quality inspection.
    """
    lines = text.strip().splitlines()
    if len(lines) < 2:
        return CsvData()

    reader = csv.reader(io.StringIO("\n".join(lines)))
    header_line = next(reader)
    headers = [h.strip() for h in header_line]
    if headers:
        headers[0] = headers[0].lstrip(_BOM).strip()

    rows: list[dict[str, Any]] = []
    raw_rows: list[dict[str, str]] = []
    for values in reader:
        if not values or (len(values) == 1 and not values[0]):
            continue
        row: dict[str, Any] = {}
        raw: dict[str, str] = {}
        for index, header in enumerate(headers):
            cell = values[index].strip() if index < len(values) else ""
            raw[header] = cell
            row[header] = _convert_cell(header, cell)
        rows.append(row)
        raw_rows.append(raw)

    return CsvData(headers=headers, rows=rows, raw_rows=raw_rows)


def load_csv(path: str | Path) -> CsvData:
    """Read and parse a CSV file. Raises IngestError for non-CSV or unreadable input."""
    path = Path(path)
    if path.suffix.lower() != ".csv":
        raise IngestError(f"Please upload a CSV file: {path.name}")

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise IngestError(f"Error processing file: {e}") from e

    data = parse_csv_text(text)
    logger.info("csv_ingested", path=str(path), rows=len(data.rows), columns=len(data.headers))
    return data
