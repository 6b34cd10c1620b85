from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_REPORT_MAX_YEAR, DEFAULT_REPORT_MIN_YEAR
from .database.connection import DBConfig, DatabaseConnection
from .floors.service import FloorService
from .floors.sql_floor_repository import SqlFloorRepository
from .reports.service import ReportService
from .stats.engine import AggregationEngine
from .stats.sql_stats_repository import SqlStatsRepository
from .system_config.service import ConfigService
from .system_config.sql_config_repository import SqlConfigRepository
from .users.service import AuthService, UserService
from .users.sql_user_repository import SqlUserRepository
from .visitors.service import VisitorEntryService
from .visitors.sql_visitor_repository import SqlVisitorEntryRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: SqlUserRepository
    floors_repo: SqlFloorRepository
    entries_repo: SqlVisitorEntryRepository
    stats_repo: SqlStatsRepository
    config_repo: SqlConfigRepository

    auth_service: AuthService
    user_service: UserService
    floor_service: FloorService
    visitor_service: VisitorEntryService
    aggregation_engine: AggregationEngine
    report_service: ReportService
    config_service: ConfigService


def connect(*, db_config: dict, database_url: Optional[str] = None, echo: bool = False) -> DatabaseConnection:
    """Engine for ``database_url`` when given, otherwise the MySQL ``db_config``."""
    if database_url:
        return DatabaseConnection(database_url, echo=echo)
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    return DatabaseConnection(config.url, echo=echo)


def build_container(
    conn: DatabaseConnection,
    *,
    report_min_year: int = DEFAULT_REPORT_MIN_YEAR,
    report_max_year: int = DEFAULT_REPORT_MAX_YEAR,
) -> Container:
    users_repo = SqlUserRepository(conn)
    floors_repo = SqlFloorRepository(conn)
    entries_repo = SqlVisitorEntryRepository(conn)
    stats_repo = SqlStatsRepository(conn)
    config_repo = SqlConfigRepository(conn)

    floor_service = FloorService(floors_repo)
    aggregation_engine = AggregationEngine(stats_repo)

    return Container(
        conn=conn,
        users_repo=users_repo,
        floors_repo=floors_repo,
        entries_repo=entries_repo,
        stats_repo=stats_repo,
        config_repo=config_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        floor_service=floor_service,
        visitor_service=VisitorEntryService(entries_repo, floor_service),
        aggregation_engine=aggregation_engine,
        report_service=ReportService(
            aggregation_engine,
            entries_repo,
            floor_service,
            min_year=report_min_year,
            max_year=report_max_year,
        ),
        config_service=ConfigService(config_repo, floor_service),
    )
