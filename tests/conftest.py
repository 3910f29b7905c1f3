"""
Shared fixtures for the mobile schema compiler tests.

Provides:
1. Editor document builders (pages, widgets)
2. Branding and export option fixtures
3. A FastAPI test client
"""
from datetime import datetime, timezone

import pytest

from mobile_schema.models.schemas.editor import EditorConfig, EditorPage, EditorWidget


FIXED_TIMESTAMP = datetime(2026, 1, 15, 9, 30, 0, tzinfo=timezone.utc)


def make_page(page_id: str, **overrides) -> dict:
    """Raw editor page dict with a single text widget"""
    page = {
        "id": page_id,
        "name": page_id,
        "displayName": f"Page {page_id}",
        "components": [
            {
                "id": f"{page_id}-w1",
                "type": "text",
                "width": 200,
                "height": 40,
                "config": {"text": f"Hello from {page_id}"},
            }
        ],
    }
    page.update(overrides)
    return page


@pytest.fixture
def widget_factory():
    def _make(**fields) -> EditorWidget:
        fields.setdefault("id", "w1")
        return EditorWidget.model_validate(fields)
    return _make


@pytest.fixture
def page_factory():
    def _make(page_id: str = "p1", **overrides) -> EditorPage:
        return EditorPage.model_validate(make_page(page_id, **overrides))
    return _make


@pytest.fixture
def editor_config_dict() -> dict:
    return {
        "spaceId": "space-1",
        "pages": [make_page("p1"), make_page("p2")],
        "sidebarConfig": {
            "items": [
                {"id": "nav-1", "type": "page", "name": "Home", "icon": "home", "pageId": "p1"},
                {"id": "nav-2", "type": "divider"},
            ]
        },
    }


@pytest.fixture
def editor_config(editor_config_dict) -> EditorConfig:
    return EditorConfig.model_validate(editor_config_dict)


@pytest.fixture
def assemble_options() -> dict:
    return {
        "appId": "app-space-1",
        "appName": "Field Service",
        "baseUrl": "https://portal.example.com",
        "updatedAt": FIXED_TIMESTAMP,
    }


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from mobile_schema.main import app

    with TestClient(app) as test_client:
        yield test_client
