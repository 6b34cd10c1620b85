from __future__ import annotations

from flask import Flask, session

from ..common.http import current_role, current_user_id, json_body, login_required, ok, permission_required
from ..container import Container
from ..core.enums import Action, Role


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        data = json_body()
        user = container.auth_service.authenticate(data.get("email"), data.get("password"))

        session.clear()
        session.permanent = True
        session["user_id"] = user.user_id
        session["role"] = user.role.value
        session["name"] = user.name

        profile = container.user_service.get_profile(user.user_id)
        return ok({"user": profile.to_public_dict()}, message="Login exitoso")

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def logout():
        session.clear()
        return ok(message="Sesión cerrada")

    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    @permission_required(Action.MANAGE_USERS)
    def register_user():
        data = json_body()
        user = container.user_service.register(
            current_role=current_role(),
            current_user_id=current_user_id(),
            name=data.get("nombre"),
            email=data.get("email"),
            password=data.get("password"),
            role=data.get("rol") or Role.OPERATOR.value,
        )
        return ok({"user": user.to_public_dict()}, message="Usuario creado exitosamente", status=201)

    @app.route("/api/auth/profile", methods=["GET"], endpoint="auth_profile")
    @login_required
    def profile():
        user = container.user_service.get_profile(current_user_id())
        return ok({"user": user.to_public_dict()})

    @app.route("/api/auth/profile", methods=["PUT"], endpoint="auth_update_profile")
    @login_required
    def update_profile():
        data = json_body()
        user = container.user_service.update_profile(
            current_user_id(),
            name=data.get("nombre"),
            email=data.get("email"),
        )
        session["name"] = user.name
        return ok({"user": user.to_public_dict()}, message="Perfil actualizado exitosamente")

    @app.route("/api/auth/change-password", methods=["PUT"], endpoint="auth_change_password")
    @login_required
    def change_password():
        data = json_body()
        container.user_service.change_password(
            current_user_id(),
            current_password=data.get("currentPassword"),
            new_password=data.get("newPassword"),
        )
        return ok(message="Contraseña actualizada exitosamente")

    @app.route("/api/auth/verify", methods=["GET"], endpoint="auth_verify")
    @login_required
    def verify():
        user = container.user_service.get_profile(current_user_id())
        return ok({"user": user.to_public_dict()}, message="Sesión válida")
