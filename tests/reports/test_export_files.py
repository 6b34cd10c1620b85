from __future__ import annotations

import io
from datetime import date

import pandas as pd

from src.visitor_control.visitor_control.reports.export import export_filename, to_csv_bytes, to_xlsx_bytes
from src.visitor_control.visitor_control.reports.model import FULL_EXPORT_COLUMNS


def test_csv_has_bom_and_header(container, floors, sample_entries):
    payload = container.report_service.export(start=date(2024, 1, 1), end=date(2024, 1, 2), mode="full")

    content = to_csv_bytes(payload)

    assert content.startswith(b"\xef\xbb\xbf")
    lines = content.decode("utf-8-sig").splitlines()
    assert lines[0] == ",".join(FULL_EXPORT_COLUMNS)
    assert len(lines) == 4


def test_xlsx_round_trips_through_pandas(container, floors, sample_entries):
    payload = container.report_service.export(mode="summary")

    df = pd.read_excel(io.BytesIO(to_xlsx_bytes(payload)), sheet_name="Resumen")

    assert list(df["Total Visitantes"]) == [8, 7]


def test_empty_export_still_has_columns(container, floors):
    payload = container.report_service.export(mode="full")

    df = pd.read_excel(io.BytesIO(to_xlsx_bytes(payload)))

    assert list(df.columns) == list(FULL_EXPORT_COLUMNS)
    assert df.empty


def test_export_filename(container, floors):
    payload = container.report_service.export(start=date(2024, 1, 1), end=date(2024, 1, 31), mode="summary")

    assert export_filename(payload, "csv") == "visitantes_summary_20240101_20240131.csv"
