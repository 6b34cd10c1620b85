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
)
from ..container import Container
from ..core.enums import Action


def _truthy(value) -> bool:
    return str(value).strip().lower() in {"1", "true", "yes", "si", "sí"}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/config/floors", methods=["GET"], endpoint="floors_list")
    @login_required
    def list_floors():
        include_inactive = _truthy(request.args.get("incluir_inactivos", "false"))
        floors = container.floor_service.list_floors(include_inactive=include_inactive)
        return ok({"pisos": [f.to_dict() for f in floors]})

    @app.route("/api/config/floors", methods=["POST"], endpoint="floors_create")
    @permission_required(Action.MANAGE_FLOORS)
    def create_floor():
        data = json_body()
        floor = container.floor_service.create_floor(
            current_role=current_role(),
            current_user_id=current_user_id(),
            name=data.get("nombre"),
            description=data.get("descripcion"),
        )
        return ok({"piso": floor.to_dict()}, message="Piso creado exitosamente", status=201)

    @app.route("/api/config/floors/<int:floor_id>", methods=["PUT"], endpoint="floors_update")
    @permission_required(Action.MANAGE_FLOORS)
    def update_floor(floor_id: int):
        data = json_body()
        extra = {"description": data["descripcion"]} if "descripcion" in data else {}
        active = data.get("activo")
        floor = container.floor_service.update_floor(
            current_role=current_role(),
            current_user_id=current_user_id(),
            floor_id=floor_id,
            name=data.get("nombre"),
            active=None if active is None else _truthy(active),
            **extra,
        )
        return ok({"piso": floor.to_dict()}, message="Piso actualizado exitosamente")

    @app.route("/api/config/floors/<int:floor_id>", methods=["DELETE"], endpoint="floors_delete")
    @permission_required(Action.MANAGE_FLOORS)
    def delete_floor(floor_id: int):
        container.floor_service.deactivate_floor(
            current_role=current_role(),
            current_user_id=current_user_id(),
            floor_id=floor_id,
        )
        return ok(message="Piso desactivado exitosamente")

    @app.route("/api/config/floors/<int:floor_id>/stats", methods=["GET"], endpoint="floors_stats")
    @permission_required(Action.VIEW_REPORTS)
    def floor_stats(floor_id: int):
        stats = container.report_service.floor_statistics(
            floor_id,
            start=query_date("fecha_inicio"),
            end=query_date("fecha_fin"),
        )
        return ok(stats.to_dict())
