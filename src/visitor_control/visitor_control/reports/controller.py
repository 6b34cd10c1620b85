from __future__ import annotations

from flask import Flask, request

from ..common.http import ok, permission_required, query_date, query_int
from ..container import Container
from ..core.enums import Action
from .export import export_filename, to_csv_bytes, to_xlsx_bytes

_XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _export_payload():
        return container.report_service.export(
            start=query_date("fecha_inicio"),
            end=query_date("fecha_fin"),
            floor_id=query_int("piso_id"),
            mode=request.args.get("formato", "full"),
        )

    def _download(content: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            content,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/dashboard", methods=["GET"], endpoint="reports_dashboard")
    @permission_required(Action.VIEW_REPORTS)
    def dashboard():
        return ok(container.report_service.dashboard().to_dict())

    @app.route("/api/reports/by-dates", methods=["GET"], endpoint="reports_by_dates")
    @permission_required(Action.VIEW_REPORTS)
    def by_dates():
        report = container.report_service.date_range_report(query_date("fecha_inicio"), query_date("fecha_fin"))
        return ok(report.to_dict())

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="reports_monthly")
    @permission_required(Action.VIEW_REPORTS)
    def monthly():
        report = container.report_service.monthly_report(
            request.args.get("año", request.args.get("anio")),
            request.args.get("mes"),
        )
        return ok(report.to_dict())

    @app.route("/api/reports/by-floor/<int:floor_id>", methods=["GET"], endpoint="reports_by_floor")
    @permission_required(Action.VIEW_REPORTS)
    def by_floor(floor_id: int):
        report = container.report_service.floor_report(
            floor_id,
            start=query_date("fecha_inicio"),
            end=query_date("fecha_fin"),
        )
        return ok(report.to_dict())

    @app.route("/api/reports/export", methods=["GET"], endpoint="reports_export")
    @permission_required(Action.VIEW_REPORTS)
    def export():
        return ok(_export_payload().to_dict())

    @app.route("/api/reports/export.xlsx", methods=["GET"], endpoint="reports_export_xlsx")
    @permission_required(Action.VIEW_REPORTS)
    def export_xlsx():
        payload = _export_payload()
        return _download(to_xlsx_bytes(payload), mimetype=_XLSX_MIMETYPE, filename=export_filename(payload, "xlsx"))

    @app.route("/api/reports/export.csv", methods=["GET"], endpoint="reports_export_csv")
    @permission_required(Action.VIEW_REPORTS)
    def export_csv():
        payload = _export_payload()
        return _download(to_csv_bytes(payload), mimetype="text/csv", filename=export_filename(payload, "csv"))
