from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from core.config import settings

ROOT = Path(__file__).parent.parent


def _alembic_config():
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    return cfg


def test_upgrade_creates_tables_matching_models(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setattr(settings, "DATABASE_URL", url)

    command.upgrade(_alembic_config(), "head")

    engine = create_engine(url)
    inspector = inspect(engine)
    assert {"accounts", "authorized_sessions"} <= set(inspector.get_table_names())
    columns = {c["name"] for c in inspector.get_columns("authorized_sessions")}
    assert {"session_id", "client_signature", "account_id", "created_at", "updated_at"} <= columns
    unique = [ix for ix in inspector.get_indexes("accounts") if ix["unique"]]
    assert [ix["column_names"] for ix in unique] == [["username"]]
    engine.dispose()


def test_downgrade_drops_tables(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setattr(settings, "DATABASE_URL", url)
    cfg = _alembic_config()

    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    engine = create_engine(url)
    assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    engine.dispose()
