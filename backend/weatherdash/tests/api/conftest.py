from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from weatherdash.api.main import create_app
from weatherdash.config import Settings


def _build_api_client(provider):
    app = create_app(provider=provider, settings=Settings(language="en"))
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def api_client(tokyo_provider):
    yield from _build_api_client(tokyo_provider)


@pytest.fixture()
def api_client_failing(failing_provider):
    yield from _build_api_client(failing_provider)
