"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_VISITOR_COUNT = 1
MAX_VISITOR_COUNT = 1000

FLOOR_NAME_MIN_LENGTH = 2
FLOOR_NAME_MAX_LENGTH = 50
FLOOR_DESCRIPTION_MAX_LENGTH = 500

USER_NAME_MIN_LENGTH = 2
USER_NAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6

CONFIG_KEY_MAX_LENGTH = 50

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 1000

TRAILING_WINDOW_DAYS = 7
DASHBOARD_RECENT_LIMIT = 10
FLOOR_REPORT_RECENT_LIMIT = 50
EXPORT_MAX_ROWS = 10_000

DEFAULT_REPORT_MIN_YEAR = 2020
DEFAULT_REPORT_MAX_YEAR = 2030

DEFAULT_SESSION_DAYS = 1

SYSTEM_CONFIG_KEYS = (
    "nombre_institucion",
    "area_responsable",
    "version_sistema",
    "backup_automatico",
)
