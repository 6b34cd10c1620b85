from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.visitor_control.visitor_control.common.log import setup_logger
from src.visitor_control.visitor_control.container import connect
from src.visitor_control.visitor_control.database.bootstrap import apply_schema, seed_demo_data


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    setup_logger("visitor_control", level=getattr(settings, "LOG_LEVEL", "INFO"))

    conn = connect(db_config=dict(settings.DB_CONFIG), database_url=getattr(settings, "DATABASE_URL", None))
    try:
        apply_schema(conn)
        seed_demo_data(conn)
    finally:
        conn.dispose()


if __name__ == "__main__":
    main()
