from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.time_tracker.time_tracker.main import build_from_settings, configure_logging, load_settings, seed_demo_data


def main() -> None:
    settings = load_settings()
    configure_logging(settings)
    container = build_from_settings(settings)
    if not container.probe.use_database:
        raise SystemExit(f"Refusing to seed: {container.probe.reason}")

    seed_demo_data(container)
    print("OK: Seeded demo user and current payroll period")


if __name__ == "__main__":
    main()
