import os

# Basic settings helper to read environment configuration.

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _as_str(val: str | None, default: str) -> str:
    if val is None or not val.strip():
        return default
    return val.strip()


def _as_level(val: str | None, default: str = "INFO") -> str:
    level = _as_str(val, default).upper()
    return level if level in _LOG_LEVELS else default


class Settings:
    def __init__(self) -> None:
        self.BOOKS_DB_PATH: str = _as_str(os.getenv("BOOKS_DB_PATH"), "books.sqlite")
        self.LOG_LEVEL: str = _as_level(os.getenv("LOG_LEVEL"))


settings = Settings()
