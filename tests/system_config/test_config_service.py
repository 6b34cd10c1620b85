from __future__ import annotations

import pytest

from src.visitor_control.visitor_control.core.enums import Role
from src.visitor_control.visitor_control.core.exceptions import AuthorizationError, ValidationError
from src.visitor_control.visitor_control.database.bootstrap import ensure_default_config


@pytest.fixture
def service(container, conn):
    ensure_default_config(conn)
    return container.config_service


def test_system_config_has_institution_keys(service):
    config = service.get_system_config()

    assert set(config) == {"nombre_institucion", "area_responsable", "version_sistema", "backup_automatico"}


def test_set_config_upserts(service, users):
    kwargs = dict(current_role=Role.ADMIN, current_user_id=users["admin"])

    created = service.set_config(key="horario_apertura", value="08:00", description="Hora de apertura", **kwargs)
    assert (created.key, created.value) == ("horario_apertura", "08:00")

    updated = service.set_config(key="horario_apertura", value=9, **kwargs)
    assert updated.value == "9"
    assert updated.description == "Hora de apertura"

    service.set_config(key="nombre_institucion", value="Museo Regional", **kwargs)
    assert service.get_system_config()["nombre_institucion"] == "Museo Regional"


def test_set_config_validation_and_permissions(service, users):
    with pytest.raises(AuthorizationError):
        service.set_config(current_role=Role.OPERATOR, current_user_id=users["op"], key="x", value="y")
    with pytest.raises(ValidationError):
        service.set_config(current_role=Role.ADMIN, current_user_id=users["admin"], key="k" * 51, value="y")
    with pytest.raises(ValidationError):
        service.set_config(current_role=Role.ADMIN, current_user_id=users["admin"], key="x", value=None)


def test_list_all_config_admin_only(service, users):
    with pytest.raises(AuthorizationError):
        service.list_all_config(current_role=Role.OPERATOR, current_user_id=users["op"])

    keys = [e.key for e in service.list_all_config(current_role=Role.ADMIN, current_user_id=users["admin"])]
    assert keys == sorted(keys)
    assert len(keys) == 4


def test_system_info(service, floors):
    info = service.system_info()

    assert info["estadisticas"]["pisos"] == {"total": 3, "activos": 2, "inactivos": 1}
    assert info["configuracion"]["version_sistema"] == "1.0.0"
    assert info["servidor"]["uptime"] >= 0
