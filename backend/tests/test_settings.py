from settings import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("BOOKS_DB_PATH", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    s = Settings()
    assert s.BOOKS_DB_PATH == "books.sqlite"
    assert s.LOG_LEVEL == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("BOOKS_DB_PATH", "/tmp/other.sqlite")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings()
    assert s.BOOKS_DB_PATH == "/tmp/other.sqlite"
    assert s.LOG_LEVEL == "DEBUG"


def test_blank_values_fall_back(monkeypatch):
    monkeypatch.setenv("BOOKS_DB_PATH", "  ")
    assert Settings().BOOKS_DB_PATH == "books.sqlite"


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert Settings().LOG_LEVEL == "INFO"
