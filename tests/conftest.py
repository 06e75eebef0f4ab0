"""Shared fixtures for octocatalog tests."""

from __future__ import annotations

import json
import time
import urllib.parse

import pytest
from fastapi.testclient import TestClient

from octocatalog.app import create_app
from octocatalog.catalog import Catalog
from octocatalog.config import Settings
from octocatalog.models import CatalogEntry, Option
from octocatalog.signature import compute_signature

SIGNING_SECRET = "test-secret"

REPO_NAMES = ["InnerGate", "OctoSlack", "Poppit", "SlackLiner", "Gateway"]


@pytest.fixture()
def signing_secret() -> str:
    return SIGNING_SECRET


@pytest.fixture()
def catalog() -> Catalog:
    """Catalog with a two-option entry and a five-repo entry."""
    return Catalog([
        CatalogEntry(
            action_id="test_action",
            options=(
                Option(text="Option 1", value="opt1"),
                Option(text="Option 2", value="opt2"),
            ),
        ),
        CatalogEntry(
            action_id="repo_select",
            options=tuple(Option(text=name, value=name) for name in REPO_NAMES),
        ),
    ])


@pytest.fixture()
def settings(monkeypatch, tmp_path) -> Settings:
    monkeypatch.setenv("SLACK_SIGNING_SECRET", SIGNING_SECRET)
    monkeypatch.setenv("CONFIG_FILE", str(tmp_path / "missing.json"))
    return Settings()


@pytest.fixture()
def app(settings, catalog):
    """Create a responder app around the in-memory test catalog."""
    return create_app(settings, catalog)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


def _signed_headers(body: bytes, content_type: str, timestamp: str | None = None) -> dict:
    if timestamp is None:
        timestamp = str(int(time.time()))
    return {
        "Content-Type": content_type,
        "X-Slack-Request-Timestamp": timestamp,
        "X-Slack-Signature": compute_signature(SIGNING_SECRET, timestamp, body),
    }


def _form_body(action_id: str, value: str = "") -> bytes:
    payload = json.dumps({
        "type": "block_suggestion",
        "action_id": action_id,
        "block_id": "test_block",
        "value": value,
    })
    return urllib.parse.urlencode({"payload": payload}).encode("utf-8")


@pytest.fixture()
def signed_headers():
    """Return a helper that builds valid Slack signature headers for a body."""
    return _signed_headers


@pytest.fixture()
def form_body():
    """Return a helper that builds a form-encoded options-load body."""
    return _form_body


@pytest.fixture()
def post_options(client):
    """POST a signed form-encoded options-load request and return the response."""

    def _post(action_id: str, value: str = ""):
        body = _form_body(action_id, value)
        return client.post(
            "/",
            content=body,
            headers=_signed_headers(body, "application/x-www-form-urlencoded"),
        )

    return _post
