"""Shared parsing utilities for tabular ingestion."""
from __future__ import annotations

import csv
import io
import logging
from io import BytesIO
from pathlib import Path
from typing import Sequence

import pandas as pd

logger = logging.getLogger(__name__)

def ensure_bytes(source: BytesIO | Path | str | bytes) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, BytesIO):
        return source.getvalue()
    if isinstance(source, str):
        source = Path(source)
    if isinstance(source, Path):
        return source.read_bytes()
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def is_excel(data: bytes) -> bool:
    # xlsx/xlsm are zip containers
    return data[:4] == b"PK\x03\x04"


def read_csv_table(data: bytes, encoding: str = "utf-8-sig") -> list[list[str]]:
    text = data.decode(encoding)
    return [row for row in csv.reader(io.StringIO(text, newline=""))]


def read_excel_table(data: bytes, sheet_name: str | int = 0) -> list[list[str]]:
    frame = pd.read_excel(
        BytesIO(data),
        sheet_name=sheet_name,
        engine="openpyxl",
        header=None,
        dtype=str,
        keep_default_na=False,
    )
    return frame.values.tolist()


def rows_from_table(table: Sequence[Sequence[str]], label: str = "table") -> list[dict[str, str]]:
    """Turn a raw grid into header-keyed rows.

    The header is the first row holding any non-blank cell. Data rows must
    have exactly as many cells as the header and at least one non-blank cell.
    """
    cleaned = [[str(cell).strip() for cell in row] for row in table]
    header_idx = next((idx for idx, row in enumerate(cleaned) if any(row)), None)
    if header_idx is None:
        raise ValueError(f"{label} has no header row")
    headers = cleaned[header_idx]

    rows: list[dict[str, str]] = []
    dropped = 0
    for row in cleaned[header_idx + 1:]:
        if not any(row):
            continue
        if len(row) != len(headers):
            dropped += 1
            continue
        rows.append(dict(zip(headers, row)))
    if dropped:
        logger.info("[%s] skipped %d rows with %d columns expected", label, dropped, len(headers))
    logger.info("[%s] loaded %d rows (columns: %s)", label, len(rows), headers)
    return rows


def load_rows(source: BytesIO | Path | str | bytes, label: str = "table") -> list[dict[str, str]]:
    data = ensure_bytes(source)
    table = read_excel_table(data) if is_excel(data) else read_csv_table(data)
    return rows_from_table(table, label=label)
