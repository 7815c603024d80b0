# tests/conftest.py
import sys
from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure the repo root is in sys.path for imports
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from work_tracker_api.app.api.dependencies import get_today  # noqa: E402
from work_tracker_api.app.core.config import settings  # noqa: E402
from work_tracker_api.app.main import app  # noqa: E402

TODAY = date(2024, 6, 1)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def api(tmp_path, monkeypatch):
    """TestClient over a fresh SQLite file with the reference date pinned."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "tracker.db"))
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def acme(api):
    """A client with three services spread over the priority tiers."""
    resp = api.post(
        "/api/v1/clients/",
        json={
            "id": "acme",
            "name": "Acme Bakery",
            "services": [
                {"service_name": "SEO", "work_name": "Keyword audit",
                 "submission_date": "2024-06-05", "priority": "Low"},
                {"service_name": "Branding", "work_name": "Logo refresh",
                 "submission_date": "2024-06-20", "priority": "Medium"},
                {"service_name": "SMM", "work_name": "July calendar",
                 "submission_date": "2024-07-15", "priority": "Low"},
            ],
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
