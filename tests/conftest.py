from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the package importable when running tests from a source checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phone_store_api.app.core.config import Settings  # noqa: E402
from phone_store_api.app.main import create_app  # noqa: E402


INITIAL_PHONES = [
    {"id": "1", "model": "A", "os": "HyperOS 1.0"},
    {"id": "2", "model": "B", "os": "HyperOS 1.0"},
]


@pytest.fixture()
def settings(tmp_path) -> Settings:
    """Settings pointing at a temporary public dir with its own phones.json."""
    return Settings(public_dir=str(tmp_path), phones_file="phones.json", cors_origins=["*"])


@pytest.fixture()
def phones_file(settings) -> Path:
    path = Path(settings.phones_file)
    path.write_text(json.dumps(INITIAL_PHONES, indent=2), encoding="utf-8")
    return path


@pytest.fixture()
def client(settings, phones_file) -> TestClient:
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
