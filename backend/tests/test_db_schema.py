from sqlalchemy import inspect, text

import db


def test_init_db_creates_books_table(tmp_path):
    engine = db.make_engine(str(tmp_path / "schema.sqlite"))
    version = db.init_db(engine)

    assert version == max(db.MIGRATIONS)
    tables = set(inspect(engine).get_table_names())
    assert {"books", "schema_version"} <= tables
    columns = {c["name"] for c in inspect(engine).get_columns("books")}
    assert columns == {"id", "title", "author"}
    engine.dispose()


def test_init_db_is_idempotent(tmp_path):
    engine = db.make_engine(str(tmp_path / "schema.sqlite"))
    first = db.init_db(engine)
    second = db.init_db(engine)

    assert first == second
    with engine.connect() as conn:
        rows = conn.execute(text("SELECT COUNT(*) FROM schema_version")).scalar()
    assert rows == len(db.MIGRATIONS)
    engine.dispose()


def test_init_db_applies_only_pending_steps(tmp_path, monkeypatch):
    engine = db.make_engine(str(tmp_path / "schema.sqlite"))
    db.init_db(engine)

    applied = []
    migrations = dict(db.MIGRATIONS)
    migrations[2] = lambda conn: applied.append(2)
    monkeypatch.setattr(db, "MIGRATIONS", migrations)

    assert db.init_db(engine) == 2
    assert applied == [2]
    engine.dispose()
