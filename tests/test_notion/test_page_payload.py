"""Tests for the page payload builder."""

import json

import pytest

from notion_register.models import RegistrationRequest
from notion_register.notion.properties import build_page_payload, build_title_property


def _make_request(**overrides) -> RegistrationRequest:
    """Create a RegistrationRequest with sensible defaults."""
    defaults = {"database_id": "db123", "title": "Buy milk"}
    defaults.update(overrides)
    return RegistrationRequest(**defaults)


def test_payload_shape():
    """Parent database and a single Name title property."""
    assert build_page_payload(_make_request()) == {
        "parent": {"database_id": "db123"},
        "properties": {
            "Name": {"title": [{"text": {"content": "Buy milk"}}]},
        },
    }


def test_payload_only_name_property():
    """No other properties are set."""
    payload = build_page_payload(_make_request())
    assert list(payload["properties"]) == ["Name"]


def test_database_id_unchanged():
    """Dashed UUIDs pass through untouched."""
    db_id = "8a1e6f0c-2b3d-4e5f-9a7b-1c2d3e4f5a6b"
    payload = build_page_payload(_make_request(database_id=db_id))
    assert payload["parent"]["database_id"] == db_id


@pytest.mark.parametrize(
    "title",
    [
        "",
        "Buy milk",
        'quote " and backslash \\',
        "line one\nline two",
        "日本語のタイトル 🚀",
        "x" * 5000,
    ],
)
def test_title_survives_json(title):
    """Title content matches exactly after a JSON round-trip."""
    payload = json.loads(json.dumps(build_page_payload(_make_request(title=title))))
    assert payload["properties"]["Name"]["title"][0]["text"]["content"] == title


def test_long_title_is_not_split():
    """One text block regardless of length."""
    prop = build_title_property("x" * 5000)
    assert len(prop["title"]) == 1
