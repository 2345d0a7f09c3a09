"""Run the Alembic migrations against a temporary SQLite database."""

from sqlalchemy import create_engine, inspect, text

from scripts.release import run_migrations


def test_upgrade_head_adds_role_with_user_default(tmp_path):
    db_url = f"sqlite:///{tmp_path/'migrated.db'}"
    run_migrations(db_url)

    engine = create_engine(db_url)
    try:
        cols = {c["name"] for c in inspect(engine).get_columns("customer")}
        assert cols == {"id", "name", "email", "gender", "age", "role"}

        with engine.begin() as conn:
            conn.execute(
                text("INSERT INTO customer (name, email, gender, age) VALUES ('Ann', 'ann@mailservice.com', 'FEMALE', 41)")
            )
            role = conn.execute(text("SELECT role FROM customer WHERE email = 'ann@mailservice.com'")).scalar_one()
        assert role == "USER"
    finally:
        engine.dispose()


def test_upgrade_is_rerunnable(tmp_path):
    db_url = f"sqlite:///{tmp_path/'twice.db'}"
    run_migrations(db_url)
    run_migrations(db_url)

    engine = create_engine(db_url)
    try:
        with engine.connect() as conn:
            version = conn.execute(text("SELECT version_num FROM alembic_version")).scalar_one()
        assert version == "d1e2f3a4b5c6"
    finally:
        engine.dispose()
