"""Pytest configuration.

Every test that touches storage gets its own file-backed SQLite database under
``tmp_path`` so tests never share rows. Telegram update stand-ins live in
``helpers/telegram_stub.py``.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Flat layout: make the repo root importable when pytest runs from elsewhere.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from config import get_settings  # noqa: E402
from services import db as db_mod  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch):
    """Give each test a known environment and a fresh settings cache."""

    monkeypatch.setenv("TELEGRAM_TOKEN", "test-token")
    for name in ("DATABASE_URL", "WEBHOOK_URL", "WEBHOOK_SECRET", "PORT", "CHART_BASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def db(tmp_path: Path):
    url = f"sqlite+pysqlite:///{tmp_path / 'finance.db'}"
    engine = db_mod.init_db(url)
    yield engine
    engine.dispose()
