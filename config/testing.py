SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "time_tracker_test",
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "memory"

AUTO_INIT_DB = False
AUTO_SEED_DB = False

MISSING_PUNCH_CUTOFF_HOUR = 18
RESERVE_DAYS = 7
PERIOD_LENGTH_DAYS = 14
