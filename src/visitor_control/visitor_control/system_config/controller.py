from __future__ import annotations

from flask import Flask

from ..common.http import current_role, current_user_id, json_body, login_required, ok, permission_required
from ..container import Container
from ..core.enums import Action


def register(app: Flask, container: Container) -> None:
    @app.route("/api/config/system", methods=["GET"], endpoint="config_system")
    @login_required
    def system_config():
        return ok(container.config_service.get_system_config())

    @app.route("/api/config/system-info", methods=["GET"], endpoint="config_system_info")
    @login_required
    def system_info():
        return ok(container.config_service.system_info())

    @app.route("/api/config/all", methods=["GET"], endpoint="config_all")
    @permission_required(Action.VIEW_ALL_CONFIG)
    def all_config():
        entries = container.config_service.list_all_config(
            current_role=current_role(),
            current_user_id=current_user_id(),
        )
        return ok({"configuraciones": [e.to_dict() for e in entries]})

    @app.route("/api/config/update", methods=["PUT"], endpoint="config_update")
    @permission_required(Action.MANAGE_CONFIG)
    def update_config():
        data = json_body()
        entry = container.config_service.set_config(
            current_role=current_role(),
            current_user_id=current_user_id(),
            key=data.get("clave"),
            value=data.get("valor"),
            description=data.get("descripcion"),
        )
        return ok({"configuracion": entry.to_dict()}, message="Configuración actualizada exitosamente")
