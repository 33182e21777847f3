"""Advance payroll periods for today: active -> review -> closed.

Meant to run once a day (cron) against the MySQL backend.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.time_tracker.time_tracker.common.datetime_utils import now_local, parse_iso_date
from src.time_tracker.time_tracker.main import build_from_settings, configure_logging, load_settings


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--today", type=parse_iso_date, default=None, help="YYYY-MM-DD, defaults to the local date")
    args = parser.parse_args()

    settings = load_settings()
    configure_logging(settings)
    container = build_from_settings(settings)
    if not container.probe.use_database:
        raise SystemExit(f"Refusing to roll periods: {container.probe.reason}")

    today = args.today or now_local().date()
    changed = container.payroll_service.roll_over(today)
    for period in changed:
        print(f"{period.start_date}..{period.end_date}: {period.status.value}")
    print(f"OK: {len(changed)} payroll period(s) updated for {today}")


if __name__ == "__main__":
    main()
