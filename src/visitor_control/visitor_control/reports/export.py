"""Export payload rendered as downloadable files."""

from __future__ import annotations

import csv
import io

import pandas as pd

from .model import ExportPayload

_SHEET_NAMES = {"full": "Visitantes", "summary": "Resumen"}


def to_xlsx_bytes(payload: ExportPayload) -> bytes:
    df = pd.DataFrame(payload.records, columns=list(payload.columns))
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=_SHEET_NAMES[payload.mode.value])
    return out.getvalue()


def to_csv_bytes(payload: ExportPayload) -> bytes:
    """UTF-8 with BOM so spreadsheet apps detect the encoding."""
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=list(payload.columns))
    writer.writeheader()
    for row in payload.records:
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")


def export_filename(payload: ExportPayload, extension: str) -> str:
    parts = ["visitantes", payload.mode.value]
    if payload.start:
        parts.append(payload.start.strftime("%Y%m%d"))
    if payload.end:
        parts.append(payload.end.strftime("%Y%m%d"))
    return "_".join(parts) + "." + extension
