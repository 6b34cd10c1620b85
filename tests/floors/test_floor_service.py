from __future__ import annotations

import pytest

from src.visitor_control.visitor_control.core.enums import Role
from src.visitor_control.visitor_control.core.exceptions import AuthorizationError, NotFoundError, ValidationError


@pytest.fixture
def service(container):
    return container.floor_service


def test_list_floors_hides_inactive_by_default(service, floors):
    assert [f.name for f in service.list_floors()] == ["Piso 1", "Piso 2"]
    assert [f.name for f in service.list_floors(include_inactive=True)] == ["Piso 1", "Piso 2", "Sótano"]


def test_create_floor_admin_only(service, users, floors):
    with pytest.raises(AuthorizationError):
        service.create_floor(current_role=Role.OPERATOR, current_user_id=users["op"], name="Piso 3")

    floor = service.create_floor(
        current_role=Role.ADMIN, current_user_id=users["admin"], name="  Piso 3 ", description="  "
    )
    assert floor.name == "Piso 3"
    assert floor.description is None
    assert floor.active


@pytest.mark.parametrize("name", ["P", "x" * 51, "", None, "Piso 1"])
def test_create_floor_rejects_bad_or_duplicate_names(service, users, floors, name):
    with pytest.raises(ValidationError):
        service.create_floor(current_role=Role.ADMIN, current_user_id=users["admin"], name=name)


def test_description_length(service, users):
    with pytest.raises(ValidationError):
        service.create_floor(current_role=Role.ADMIN, current_user_id=users["admin"], name="Piso 9", description="d" * 501)


def test_update_floor(service, users, floors):
    kwargs = dict(current_role=Role.ADMIN, current_user_id=users["admin"], floor_id=floors["p1"])

    floor = service.update_floor(name="Planta Baja", description="Recepción", **kwargs)
    assert (floor.name, floor.description) == ("Planta Baja", "Recepción")

    floor = service.update_floor(description=None, **kwargs)
    assert floor.description is None
    assert floor.name == "Planta Baja"

    with pytest.raises(ValidationError):
        service.update_floor(name="Piso 2", **kwargs)


def test_reactivate_floor(service, users, floors):
    floor = service.update_floor(
        current_role=Role.ADMIN, current_user_id=users["admin"], floor_id=floors["old"], active=True
    )
    assert floor.active


def test_deactivate_is_soft(service, users, floors):
    service.deactivate_floor(current_role=Role.ADMIN, current_user_id=users["admin"], floor_id=floors["p2"])

    assert service.get_floor(floors["p2"]).active is False
    assert service.floor_counts() == {"total": 3, "activos": 1, "inactivos": 2}


def test_unknown_floor(service, users):
    with pytest.raises(NotFoundError):
        service.get_floor(404)
    with pytest.raises(NotFoundError):
        service.deactivate_floor(current_role=Role.ADMIN, current_user_id=users["admin"], floor_id=404)
