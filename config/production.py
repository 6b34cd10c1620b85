import os

from .config import Config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = Config.db_config()
DATABASE_URL = Config.DATABASE_URL

DEBUG = False

SESSION_DAYS = Config.SESSION_DAYS
REPORT_MIN_YEAR = Config.REPORT_MIN_YEAR
REPORT_MAX_YEAR = Config.REPORT_MAX_YEAR

LOG_LEVEL = Config.LOG_LEVEL
LOG_FILE = Config.LOG_FILE

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
