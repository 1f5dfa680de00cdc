from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from plexpay.database.bootstrap import seed_demo_data
from plexpay.main import create_app


def main() -> None:
    app = create_app({"STORAGE_BACKEND": "sql", "AUTO_INIT_DB": True, "AUTO_SEED_DB": False})
    container = app.extensions["plexpay.container"]

    with app.app_context():
        seeded = seed_demo_data(container)

    print("OK: demo data seeded" if seeded else "OK: demo data already present")


if __name__ == "__main__":
    main()
