"""
Tests for the Alembic migrations
"""

import pytest
from sqlalchemy import create_engine, inspect

from alembic import command
from registrar.config import settings
from registrar.database.cli import get_alembic_config


@pytest.mark.integration
def test_upgrade_and_downgrade(tmp_path, monkeypatch):
    """The initial migration creates and drops all tables."""
    db_path = tmp_path / "migrations.db"
    monkeypatch.setattr(settings, "database_url", f"sqlite:///{db_path}")
    config = get_alembic_config()

    command.upgrade(config, "head")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        tables = set(inspect(engine).get_table_names())
        assert {"departments", "students", "teachers", "courses"} <= tables
        columns = {c["name"] for c in inspect(engine).get_columns("students")}
        assert columns == {"id", "email", "full_name", "enrolled", "dept_id"}

        command.downgrade(config, "base")
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()
