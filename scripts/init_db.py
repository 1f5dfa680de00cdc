from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from sqlalchemy import inspect

from plexpay.database.bootstrap import init_schema
from plexpay.extensions import db
from plexpay.main import create_app


def main() -> None:
    app = create_app({"STORAGE_BACKEND": "sql", "AUTO_INIT_DB": False, "AUTO_SEED_DB": False})
    init_schema(app)

    with app.app_context():
        tables = inspect(db.engine).get_table_names()
        print(f"OK: schema ready -> {db.engine.url.render_as_string(hide_password=True)} (tables={len(tables)})")


if __name__ == "__main__":
    main()
