from __future__ import annotations

import importlib
import time
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.http import EXTENSION_KEY, ok, register_error_handlers, register_request_logging
from .common.log import setup_logger
from .container import build_container, connect
from .core.constants import DEFAULT_REPORT_MAX_YEAR, DEFAULT_REPORT_MIN_YEAR, DEFAULT_SESSION_DAYS
from .database.bootstrap import apply_schema, list_tables, seed_demo_data
from .floors.controller import register as register_floors
from .reports.controller import register as register_reports
from .system_config.controller import register as register_config
from .users.controller import register as register_users
from .visitors.controller import register as register_visitors

API_VERSION = "1.0.0"


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    logger = setup_logger(
        "visitor_control",
        log_file=getattr(settings, "LOG_FILE", None),
        level=getattr(settings, "LOG_LEVEL", "INFO"),
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_DAYS"] = int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS))
    app.permanent_session_lifetime = timedelta(days=app.config["SESSION_DAYS"])
    app.json.ensure_ascii = False

    db_config = getattr(settings, "DB_CONFIG")
    database_url = getattr(settings, "DATABASE_URL", None)
    conn = connect(db_config=db_config, database_url=database_url)
    logger.info("settings=%s db=%s", settings_module, conn.engine.url.render_as_string(hide_password=True))

    if getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(conn)
        logger.info("Schema ready (tables=%d)", len(list_tables(conn)))
    if getattr(settings, "AUTO_SEED_DB", False):
        seed_demo_data(conn)

    container = build_container(
        conn,
        report_min_year=int(getattr(settings, "REPORT_MIN_YEAR", DEFAULT_REPORT_MIN_YEAR)),
        report_max_year=int(getattr(settings, "REPORT_MAX_YEAR", DEFAULT_REPORT_MAX_YEAR)),
    )
    app.extensions[EXTENSION_KEY] = container

    started_at = time.monotonic()

    @app.route("/api", methods=["GET"], endpoint="api_index")
    def api_index():
        return ok(
            {
                "version": API_VERSION,
                "endpoints": {
                    "auth": "/api/auth",
                    "visitors": "/api/visitors",
                    "reports": "/api/reports",
                    "config": "/api/config",
                },
            },
            message="API Control de Visitantes",
        )

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        return ok({"status": "OK", "uptime": int(time.monotonic() - started_at), "environment": settings_module})

    register_error_handlers(app)
    register_request_logging(app)

    register_users(app, container)
    register_visitors(app, container)
    register_reports(app, container)
    register_floors(app, container)
    register_config(app, container)

    return app
