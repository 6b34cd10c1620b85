from .config import Config

SECRET_KEY = "test-secret"
DB_CONFIG = Config.db_config()
DATABASE_URL = "sqlite://"

DEBUG = False
TESTING = True

SESSION_DAYS = 1
REPORT_MIN_YEAR = 2020
REPORT_MAX_YEAR = 2030

LOG_LEVEL = "WARNING"
LOG_FILE = None

AUTO_INIT_DB = True
AUTO_SEED_DB = True
