"""Example: use the service layer directly, without Flask.

Controllers stay thin; the reports come straight from the services.
"""

import importlib
import json

from config import get_settings_module

from src.visitor_control.visitor_control.container import build_container, connect


def main():
    settings = importlib.import_module(get_settings_module())
    conn = connect(db_config=settings.DB_CONFIG, database_url=getattr(settings, "DATABASE_URL", None))
    container = build_container(conn)
    dashboard = container.report_service.dashboard()
    print(json.dumps(dashboard.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
