import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture
def engine(tmp_path):
    from db import init_db, make_engine

    eng = make_engine(str(tmp_path / "books.sqlite"))
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    from db import make_session_factory

    with make_session_factory(engine)() as s:
        yield s


@pytest.fixture
def client(tmp_path):
    from fastapi.testclient import TestClient
    from api.main import create_app

    app = create_app(str(tmp_path / "api.sqlite"))
    with TestClient(app) as c:
        yield c
