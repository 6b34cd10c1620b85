from .config import Config, env_flag

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = Config.db_config()
DATABASE_URL = Config.DATABASE_URL

DEBUG = True

SESSION_DAYS = Config.SESSION_DAYS
REPORT_MIN_YEAR = Config.REPORT_MIN_YEAR
REPORT_MAX_YEAR = Config.REPORT_MAX_YEAR

LOG_LEVEL = "DEBUG"
LOG_FILE = Config.LOG_FILE

# Creates missing tables on startup (idempotent)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Also insert demo floors, config and accounts
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
