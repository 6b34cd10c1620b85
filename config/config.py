import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


class Config:
    """Values shared by every environment."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "clave-secreta-desarrollo"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "control_visitantes")

    # Full SQLAlchemy URL; overrides the MySQL values above when set
    DATABASE_URL = os.environ.get("DATABASE_URL") or None

    SESSION_DAYS = int(os.environ.get("SESSION_DAYS", "1"))

    REPORT_MIN_YEAR = int(os.environ.get("REPORT_MIN_YEAR", "2020"))
    REPORT_MAX_YEAR = int(os.environ.get("REPORT_MAX_YEAR", "2030"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE") or None

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
