from __future__ import annotations

import importlib
import logging
from datetime import datetime
from pathlib import Path
from types import ModuleType
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import now_local
from .container import Container, build_container
from .core.enums import StorageBackend
from .database.bootstrap import apply_schema, probe_storage
from .database.connection import DatabaseConnection, DBConfig
from .payroll.controller import register as register_payroll
from .timesheets.controller import register as register_timesheets
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def load_settings(settings_module: Optional[str] = None) -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(settings_module or get_settings_module())


def configure_logging(settings: ModuleType) -> None:
    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def build_from_settings(
    settings: ModuleType,
    *,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    """Probe storage once, prepare it, and wire every service for this process."""
    conn = DatabaseConnection(DBConfig.from_mapping(getattr(settings, "DB_CONFIG", {})))
    probe = probe_storage(conn, StorageBackend(getattr(settings, "STORAGE_BACKEND", "auto")))
    logger.info("Storage backend: %s (%s)", probe.backend.value, probe.reason)

    if probe.use_database and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(conn, schema_path=SCHEMA_PATH)

    container = build_container(
        conn=conn,
        probe=probe,
        clock=clock,
        cutoff_hour=int(getattr(settings, "MISSING_PUNCH_CUTOFF_HOUR", 18)),
        reserve_days=int(getattr(settings, "RESERVE_DAYS", 7)),
        period_length_days=int(getattr(settings, "PERIOD_LENGTH_DAYS", 14)),
    )

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seed_demo_data(container)
    return container


def seed_demo_data(container: Container) -> None:
    user = container.user_service.ensure_demo_user()
    period = container.payroll_service.ensure_current_period(container.clock().date())
    logger.info("Demo data ready: user=%s period=%s..%s", user.username, period.start_date, period.end_date)


def create_app(
    settings_module: Optional[str] = None,
    *,
    clock: Callable[[], datetime] = now_local,
) -> Flask:
    settings = load_settings(settings_module)
    configure_logging(settings)

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    container = build_from_settings(settings, clock=clock)
    app.extensions["time_tracker"] = container

    register_users(app, container)
    register_timesheets(app, container)
    register_payroll(app, container)

    return app
