"""Tests for the test_db_connection adapter."""

from src.adapters import test_db_connection


class _RecordingConnection:
    def __init__(self) -> None:
        self.statements: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.statements.append(statement)


class _FakeEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _RecordingConnection()

    def connect(self):
        return self.connection


class _ListLogger:
    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, msg: str) -> None:
        self.infos.append(msg)

    def error(self, msg: str) -> None:
        self.errors.append(msg)


def _patch(monkeypatch, adapter, logger) -> None:
    monkeypatch.setattr(
        test_db_connection, "build_database_adapter", lambda: adapter
    )
    monkeypatch.setattr(test_db_connection, "get_app_logger", lambda: logger)


def test_main_runs_select_one(monkeypatch):
    """The CLI should log the URL and execute SELECT 1."""
    engine = _FakeEngine("sqlite:///wealth.db")

    class _Adapter:
        def get_engine(self):
            return engine

    logger = _ListLogger()
    _patch(monkeypatch, _Adapter(), logger)

    test_db_connection.main()

    assert logger.infos == [
        "Wealth DB: sqlite:///wealth.db",
        "Connection is working.",
    ]
    assert engine.connection.statements == ["SELECT 1"]


def test_main_logs_missing_configuration(monkeypatch):
    """A missing database URL is reported instead of raised."""

    class _Adapter:
        def get_engine(self):
            raise RuntimeError("Missing environment variable: WEALTH_DB_URL")

    logger = _ListLogger()
    _patch(monkeypatch, _Adapter(), logger)

    test_db_connection.main()

    assert logger.errors == ["Missing environment variable: WEALTH_DB_URL"]
    assert logger.infos == []
