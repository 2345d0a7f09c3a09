import logging
import os

from flask import Flask, jsonify, request
from dotenv import load_dotenv
from sqlalchemy import inspect as sa_inspect

from app.crm.config import load_config
from app.crm.db import init_db, teardown_db_session
from app.crm.errors import register_error_handlers
from app.crm.routes import bp as routes_bp
from app.crm.modules.customers.api import bp as customers_bp

# Columns the code expects; anything missing means migrations were not applied.
EXPECTED_SCHEMA: dict[str, tuple[str, ...]] = {
    "customer": ("id", "name", "email", "gender", "age", "role"),
}


def create_app() -> Flask:
    load_dotenv()
    app = Flask(__name__)
    app.config.from_mapping(load_config())
    # keep field order as written by the serializers
    app.json.sort_keys = False
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    if env in ("prod", "production"):
        if not app.config.get("DATABASE_URL"):
            raise RuntimeError("DATABASE_URL is required in production.")
        if str(app.config["DATABASE_URL"]).startswith("sqlite"):
            raise RuntimeError("DATABASE_URL must be Postgres in production (not sqlite).")
        if str(app.config.get("SECRET_KEY") or "") in ("", "change-me"):
            raise RuntimeError("SECRET_KEY must be set to a strong value in production (not default).")

    init_db(app)

    if hasattr(os, "register_at_fork"):
        def _after_fork_child():
            engine = app.extensions.get("sqlalchemy_engine")
            if engine:
                engine.dispose()
                app.logger.info("Disposed DB engine after fork (pid=%s)", os.getpid())

        os.register_at_fork(after_in_child=_after_fork_child)

    app.register_blueprint(routes_bp)
    app.register_blueprint(customers_bp, url_prefix="/api/v1")

    app.teardown_appcontext(teardown_db_session)
    register_error_handlers(app)

    # Migration health: detect drift between code expectations and DB schema.
    app.config["_schema_health_missing"] = _run_schema_health_check(app)
    if app.config["_schema_health_missing"]:
        app.logger.error(
            "DB schema out of date; run `alembic upgrade head`. Missing: %s",
            ", ".join(app.config["_schema_health_missing"]),
        )

    @app.before_request
    def _schema_health_guardrail():
        missing = app.config.get("_schema_health_missing")
        if not missing or not request.path.startswith("/api/"):
            return None
        # Re-check once per request so a migration run after boot clears the flag.
        missing = _run_schema_health_check(app)
        app.config["_schema_health_missing"] = missing
        if missing:
            return jsonify({"error": "database schema out of date", "missing": missing, "status": 500}), 500
        return None

    logging.getLogger(__name__).info("create_app() complete; app ready to serve")
    return app


def _run_schema_health_check(app: Flask) -> list[str]:
    """
    check_schema() that never fails the caller: an unreachable DB leaves the
    schema unknown (nothing reported missing) so the app still boots.
    """
    try:
        return check_schema(app)
    except Exception as e:
        app.logger.exception("Schema health check failed: %s", e)
        return []


def check_schema(app: Flask) -> list[str]:
    missing: list[str] = []
    engine = app.extensions["sqlalchemy_engine"]
    insp = sa_inspect(engine)
    for table, columns in EXPECTED_SCHEMA.items():
        if not insp.has_table(table):
            missing.append(f"{table} (table)")
            continue
        cols = {c["name"] for c in insp.get_columns(table)}
        missing.extend(f"{table}.{col}" for col in columns if col not in cols)
    return missing
