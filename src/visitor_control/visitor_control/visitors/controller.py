from __future__ import annotations

from flask import Flask, request

from ..common.http import (
    current_role,
    current_user_id,
    json_body,
    login_required,
    ok,
    permission_required,
    query_date,
    query_int,
)
from ..container import Container
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import Action, Weekday
from ..core.exceptions import ValidationError
from .model import EntryFilter


def _query_weekday():
    value = request.args.get("dia_semana")
    if not value:
        return None
    try:
        return Weekday(value)
    except ValueError:
        raise ValidationError("Día de la semana no válido")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/visitors", methods=["POST"], endpoint="visitors_create")
    @login_required
    def create_entry():
        data = json_body()
        if data.get("piso_id") is None:
            raise ValidationError("El piso es obligatorio")
        view = container.visitor_service.create_entry(
            current_role=current_role(),
            current_user_id=current_user_id(),
            floor_id=data.get("piso_id"),
            count=data.get("cantidad"),
            entry_date=data.get("fecha"),
            entry_time=data.get("hora"),
            notes=data.get("observaciones"),
        )
        return ok({"visitante": view.to_dict()}, message="Registro de visitantes creado exitosamente", status=201)

    @app.route("/api/visitors", methods=["GET"], endpoint="visitors_list")
    @permission_required(Action.VIEW_REPORTS)
    def list_entries():
        flt = EntryFilter(
            start=query_date("fecha_inicio"),
            end=query_date("fecha_fin"),
            floor_id=query_int("piso_id"),
            day_of_week=_query_weekday(),
            recorded_by_user_id=query_int("usuario_id"),
        )
        page = container.visitor_service.list_entries(
            flt,
            page=request.args.get("page", 1),
            limit=request.args.get("limit", DEFAULT_PAGE_SIZE),
        )
        return ok(page.to_dict())

    @app.route("/api/visitors/estadisticas", methods=["GET"], endpoint="visitors_stats")
    @permission_required(Action.VIEW_REPORTS)
    def statistics():
        return ok(container.report_service.general_statistics().to_dict())

    @app.route("/api/visitors/chart-data", methods=["GET"], endpoint="visitors_chart_data")
    @permission_required(Action.VIEW_REPORTS)
    def chart_data():
        return ok(container.report_service.chart_data().to_dict())

    @app.route("/api/visitors/<int:entry_id>", methods=["GET"], endpoint="visitors_get")
    @permission_required(Action.VIEW_REPORTS)
    def get_entry(entry_id: int):
        return ok({"visitante": container.visitor_service.get_entry(entry_id).to_dict()})

    @app.route("/api/visitors/<int:entry_id>", methods=["PUT"], endpoint="visitors_update")
    @login_required
    def update_entry(entry_id: int):
        data = json_body()
        view = container.visitor_service.update_entry(
            current_role=current_role(),
            current_user_id=current_user_id(),
            entry_id=entry_id,
            floor_id=data.get("piso_id"),
            count=data.get("cantidad"),
            entry_date=data.get("fecha"),
            entry_time=data.get("hora"),
            **({"notes": data["observaciones"]} if "observaciones" in data else {}),
        )
        return ok({"visitante": view.to_dict()}, message="Registro actualizado exitosamente")

    @app.route("/api/visitors/<int:entry_id>", methods=["DELETE"], endpoint="visitors_delete")
    @login_required
    def delete_entry(entry_id: int):
        container.visitor_service.delete_entry(
            current_role=current_role(),
            current_user_id=current_user_id(),
            entry_id=entry_id,
        )
        return ok(message="Registro eliminado exitosamente")
