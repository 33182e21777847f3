from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.time_tracker.time_tracker.database.bootstrap import apply_schema, list_tables
from src.time_tracker.time_tracker.database.connection import DatabaseConnection, DBConfig
from src.time_tracker.time_tracker.main import SCHEMA_PATH, load_settings


def main() -> None:
    settings = load_settings()
    conn = DatabaseConnection(DBConfig.from_mapping(settings.DB_CONFIG))

    apply_schema(conn, schema_path=SCHEMA_PATH)
    tables = list_tables(conn)
    print(f"OK: Applied schema.sql -> {conn.config.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
