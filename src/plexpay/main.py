from __future__ import annotations

import importlib
import time
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, g, jsonify, request

from .container import MEMORY_BACKEND, SQL_BACKEND, build_container
from .core.constants import APP_VERSION
from .database.bootstrap import init_schema, seed_demo_data
from .employees.controller import register as register_employees
from .expenses.controller import register as register_expenses
from .extensions import db
from .income.controller import register as register_income
from .logging_utils import configure_root_logger, get_logger
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports
from .settings import get_settings_module
from .users.controller import register as register_users

LOGGER = get_logger(__name__)

SETTING_NAMES = (
    "SECRET_KEY",
    "SQLALCHEMY_DATABASE_URI",
    "SQLALCHEMY_TRACK_MODIFICATIONS",
    "SQLALCHEMY_ENGINE_OPTIONS",
    "STORAGE_BACKEND",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "AUTO_INIT_DB",
    "AUTO_SEED_DB",
)


def _load_settings(overrides: Optional[Mapping[str, Any]]) -> dict:
    settings = importlib.import_module(get_settings_module())
    config = {name: getattr(settings, name) for name in SETTING_NAMES if hasattr(settings, name)}
    config.update(overrides or {})
    return config


def _register_request_logging(app: Flask) -> None:
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        if request.path.startswith("/api"):
            started = g.get("request_started")
            elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
            LOGGER.info("%s %s %s in %.0fms", request.method, request.path, response.status_code, elapsed_ms)
        return response


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)
    app.config.update(_load_settings(overrides))

    configure_root_logger(app.config.get("LOG_LEVEL", "INFO"))

    backend = app.config.get("STORAGE_BACKEND", SQL_BACKEND)
    if backend == SQL_BACKEND:
        db.init_app(app)
        container = build_container(backend=SQL_BACKEND, db=db)
        if app.config.get("AUTO_INIT_DB"):
            init_schema(app)
    elif backend == MEMORY_BACKEND:
        container = build_container(backend=MEMORY_BACKEND)
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")

    if app.config.get("AUTO_SEED_DB"):
        with app.app_context():
            seed_demo_data(container)

    app.extensions["plexpay.container"] = container

    if app.config.get("DEBUG"):
        LOGGER.info("PlexPay %s starting (storage=%s)", APP_VERSION, backend)

    register_users(app, container)
    register_expenses(app, container)
    register_employees(app, container)
    register_payroll(app, container)
    register_income(app, container)
    register_reports(app, container)

    @app.route("/api/health", endpoint="health")
    def health():
        return jsonify(
            {
                "status": "ok",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "version": APP_VERSION,
            }
        )

    _register_request_logging(app)
    return app
