from __future__ import annotations

from datetime import date

import pytest

from src.visitor_control.visitor_control.main import create_app


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, email="admin@example.com", password="admin123"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def test_index_and_health(client):
    assert client.get("/api").get_json()["success"] is True
    health = client.get("/api/health").get_json()
    assert health["data"]["status"] == "OK"


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_requires_session(client):
    resp = client.get("/api/reports/dashboard")
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_login_failure(client):
    resp = login(client, password="wrong")
    assert resp.status_code == 401
    assert resp.get_json()["code"] == "AUTHENTICATION_ERROR"


def test_login_profile_logout(client):
    resp = login(client)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["user"]["rol"] == "admin"

    assert client.get("/api/auth/verify").status_code == 200
    assert client.get("/api/auth/profile").get_json()["data"]["user"]["email"] == "admin@example.com"

    client.post("/api/auth/logout")
    assert client.get("/api/auth/profile").status_code == 401


def test_record_and_report_flow(client):
    login(client)
    today = date.today().isoformat()

    created = client.post(
        "/api/visitors",
        json={"piso_id": 1, "cantidad": 12, "fecha": today, "hora": "10:15", "observaciones": "Visita guiada"},
    )
    assert created.status_code == 201
    entry = created.get_json()["data"]["visitante"]
    assert entry["piso"]["id"] == 1

    listing = client.get("/api/visitors", query_string={"fecha_inicio": today, "fecha_fin": today}).get_json()
    assert listing["data"]["pagination"]["total"] == 1

    dashboard = client.get("/api/reports/dashboard").get_json()["data"]
    assert dashboard["estadisticas_generales"]["hoy"] == {"registros": 1, "visitantes": 12}
    assert dashboard["piso_mas_visitado_hoy"]["piso_id"] == 1

    report = client.get("/api/reports/by-dates", query_string={"fecha_inicio": today, "fecha_fin": today})
    assert report.get_json()["data"]["resumen"]["promedio"] == "12.00"

    updated = client.put(f"/api/visitors/{entry['id']}", json={"cantidad": 20})
    assert updated.get_json()["data"]["visitante"]["cantidad"] == 20

    assert client.delete(f"/api/visitors/{entry['id']}").status_code == 200
    assert client.get(f"/api/visitors/{entry['id']}").status_code == 404


def test_validation_errors_map_to_400(client):
    login(client)

    bad_count = client.post(
        "/api/visitors", json={"piso_id": 1, "cantidad": 0, "fecha": "2024-01-01", "hora": "10:00"}
    )
    assert bad_count.status_code == 400

    bad_range = client.get("/api/reports/by-dates", query_string={"fecha_inicio": "2024-02-01", "fecha_fin": "2024-01-01"})
    assert bad_range.status_code == 400
    assert bad_range.get_json()["code"] == "INVALID_RANGE"

    bad_mode = client.get("/api/reports/export", query_string={"formato": "pdf"})
    assert bad_mode.status_code == 400
    assert bad_mode.get_json()["code"] == "INVALID_MODE"

    bad_month = client.get("/api/reports/monthly", query_string={"anio": 2019, "mes": 1})
    assert bad_month.status_code == 400

    malformed = client.get("/api/reports/by-dates", query_string={"fecha_inicio": "2024-13-01", "fecha_fin": "2024-12-31"})
    assert malformed.status_code == 400
    assert malformed.get_json()["code"] == "INVALID_RANGE"

    not_numeric = client.get("/api/reports/monthly", query_string={"año": "abc", "mes": 2})
    assert not_numeric.status_code == 400
    assert not_numeric.get_json()["code"] == "INVALID_RANGE"


def test_monthly_report_reads_year_parameter(client):
    login(client)

    resp = client.get("/api/reports/monthly", query_string={"año": 2024, "mes": 2})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["periodo"]["anio"] == 2024

    legacy = client.get("/api/reports/monthly", query_string={"anio": 2023, "mes": 5})
    assert legacy.status_code == 200
    assert legacy.get_json()["data"]["periodo"]["mes"] == 5


def test_floor_errors(client):
    login(client)

    assert client.get("/api/reports/by-floor/999").status_code == 404

    client.delete("/api/config/floors/3")
    inactive = client.post(
        "/api/visitors", json={"piso_id": 3, "cantidad": 5, "fecha": "2024-01-01", "hora": "10:00"}
    )
    assert inactive.status_code == 409
    assert inactive.get_json()["code"] == "INACTIVE"

    assert client.get("/api/reports/by-floor/3").status_code == 200


def test_operator_is_forbidden_from_admin_routes(client):
    login(client, "operador@example.com", "operador123")

    assert client.get("/api/config/all").status_code == 403
    assert client.post("/api/config/floors", json={"nombre": "Nuevo"}).status_code == 403
    assert client.put("/api/config/floors/1", json={"nombre": "Otro"}).status_code == 403
    assert client.put("/api/config/update", json={"clave": "x", "valor": "y"}).status_code == 403
    register = client.post(
        "/api/auth/register",
        json={"nombre": "Nuevo", "email": "nuevo@example.com", "password": "secreto123"},
    )
    assert register.status_code == 403
    assert register.get_json()["code"] == "FORBIDDEN"
    assert client.get("/api/config/system").status_code == 200
    assert client.get("/api/reports/dashboard").status_code == 200


def test_admin_config_routes(client):
    login(client)

    created = client.post("/api/config/floors", json={"nombre": "Piso 3", "descripcion": "Biblioteca"})
    assert created.status_code == 201

    duplicate = client.post("/api/config/floors", json={"nombre": "Piso 3"})
    assert duplicate.status_code == 400

    floors = client.get("/api/config/floors").get_json()["data"]["pisos"]
    assert "Piso 3" in [f["nombre"] for f in floors]

    updated = client.put("/api/config/update", json={"clave": "nombre_institucion", "valor": "Museo"})
    assert updated.status_code == 200
    assert client.get("/api/config/system").get_json()["data"]["nombre_institucion"] == "Museo"

    info = client.get("/api/config/system-info").get_json()["data"]
    assert info["estadisticas"]["pisos"]["total"] == 4


def test_export_downloads(client):
    login(client)

    csv_resp = client.get("/api/reports/export.csv", query_string={"formato": "summary"})
    assert csv_resp.status_code == 200
    assert csv_resp.mimetype == "text/csv"
    assert csv_resp.data.startswith(b"\xef\xbb\xbf")
    assert "attachment" in csv_resp.headers["Content-Disposition"]

    xlsx_resp = client.get("/api/reports/export.xlsx")
    assert xlsx_resp.status_code == 200
    assert xlsx_resp.data[:2] == b"PK"
