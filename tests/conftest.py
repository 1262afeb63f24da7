from datetime import datetime, timezone
import sys
from pathlib import Path

import pytest

# Ensure `import shelfsheet` works when running `pytest` without installing the package.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _freeze_export_filename_timestamp(monkeypatch) -> None:
    fixed_now = datetime(2026, 2, 8, 0, 0, 0, tzinfo=timezone.utc)
    monkeypatch.setattr("shelfsheet.core.codec.utils._utcnow", lambda: fixed_now)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in ("SHELFSHEET_DEBUG", "LOG_VERBOSITY", "SHELFSHEET_SHEET_TITLE", "SHELFSHEET_DATE_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    from shelfsheet.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
