"""Pytest configuration and fixtures."""

import os
from datetime import datetime
from pathlib import Path

import pytest
from sqlalchemy import create_engine, text

from historysearch.core.chrome_time import from_datetime
from historysearch.settings import Settings, get_settings

# (url, title, visit_count, last visit)
SAMPLE_VISITS = [
    ("https://bank.example.com/login", "Bank Login", 3, datetime(2024, 1, 15, 9, 30)),
    ("https://bank.example.com/login?session=old", "Bank Login", 1, datetime(2023, 12, 20, 8, 0)),
    ("https://news.example.com/", "Daily News", 7, datetime(2024, 1, 20, 12, 0)),
    ("https://bank.example.com/statements", "Bank Statements", 2, datetime(2024, 1, 10, 18, 45)),
    ("https://bank.example.com/login?month=feb", "Bank Login", 5, datetime(2024, 2, 5, 10, 0)),
    ("https://docs.python.org/3/", "Python docs", 12, datetime(2024, 1, 5, 7, 15)),
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Clear cached settings and keep the environment and .env out of tests."""
    for name in list(os.environ):
        if name.upper().startswith("CHROME_HISTORY_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def create_history_db(path: Path, visits=SAMPLE_VISITS) -> Path:
    """Write a minimal Chrome History database with the given visits."""
    path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as conn:
        conn.execute(
            text("""
                CREATE TABLE urls (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    url LONGVARCHAR,
                    title LONGVARCHAR,
                    visit_count INTEGER DEFAULT 0 NOT NULL,
                    typed_count INTEGER DEFAULT 0 NOT NULL,
                    last_visit_time INTEGER NOT NULL,
                    hidden INTEGER DEFAULT 0 NOT NULL
                )
            """)
        )
        for url, title, visit_count, visited in visits:
            conn.execute(
                text("""
                    INSERT INTO urls (url, title, visit_count, last_visit_time)
                    VALUES (:url, :title, :visit_count, :last_visit_time)
                """),
                {
                    "url": url,
                    "title": title,
                    "visit_count": visit_count,
                    "last_visit_time": from_datetime(visited),
                },
            )
    engine.dispose()
    return path


@pytest.fixture
def history_db(tmp_path: Path) -> Path:
    """Sample History file laid out like a Chrome profile directory."""
    return create_history_db(tmp_path / "chrome" / "Default" / "History")


@pytest.fixture
def make_history_db(tmp_path: Path):
    """Factory for History files with custom visits."""

    def _make(visits, name: str = "History") -> Path:
        return create_history_db(tmp_path / "custom" / name, visits)

    return _make


@pytest.fixture
def settings(history_db: Path, tmp_path: Path) -> Settings:
    """Settings pointing at the sample History file."""
    snapshot_dir = tmp_path / "snapshots"
    snapshot_dir.mkdir()
    return Settings(history_path=history_db, snapshot_dir=snapshot_dir)
