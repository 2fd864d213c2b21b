from sqlalchemy import create_engine, inspect

from repohistory.db import migrate, paths


def test_upgrade_to_head_creates_schema(tmp_path, monkeypatch):
    monkeypatch.setenv("REPOHISTORY_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("REPOHISTORY_ALEMBIC_DIR", raising=False)

    migrate.upgrade_to_head()
    # second run is a no-op
    migrate.upgrade_to_head()

    engine = create_engine(f"sqlite:///{paths.db_path().as_posix()}")
    try:
        insp = inspect(engine)
        assert insp.has_table("repository_history")
        assert insp.has_table("alembic_version")
        cols = {c["name"] for c in insp.get_columns("repository_history")}
        assert cols == {"id", "key", "position", "path", "category"}
    finally:
        engine.dispose()
