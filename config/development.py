import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "time_tracker"),
    "connect_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "3")),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# auto: try MySQL, fall back to in-memory storage; mysql: require it; memory: never connect
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "auto")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Demo user (admin/admin123) and a current payroll period
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))

MISSING_PUNCH_CUTOFF_HOUR = int(os.getenv("MISSING_PUNCH_CUTOFF_HOUR", "18"))
RESERVE_DAYS = int(os.getenv("RESERVE_DAYS", "7"))
PERIOD_LENGTH_DAYS = int(os.getenv("PERIOD_LENGTH_DAYS", "14"))
