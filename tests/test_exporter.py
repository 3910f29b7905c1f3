"""Tests for the export pipeline."""
import json

import pytest
import yaml

from mobile_schema.models.schemas.app import MobileApp
from mobile_schema.models.schemas.components import Component
from mobile_schema.models.schemas.core import ComponentType
from mobile_schema.models.schemas.page import Page
from mobile_schema.services.compilation.exporter import (
    NO_MATCHING_PAGES,
    export_filename,
    export_schema,
    serialize_schema,
)

from conftest import make_page


def _options(assemble_options, **extra):
    options = dict(assemble_options)
    options.update(extra)
    return options


def test_full_export_returns_app(editor_config_dict, assemble_options):
    result = export_schema(editor_config_dict, None, _options(assemble_options))

    assert result.success is True
    assert isinstance(result.data, MobileApp)
    assert result.format == "json"
    assert result.size == len(serialize_schema(result.data))
    assert result.error is None


def test_page_export_with_unknown_ids_fails(editor_config_dict, assemble_options):
    result = export_schema(
        editor_config_dict,
        None,
        _options(assemble_options, format="page", pageIds=["missing"]),
    )

    assert result.success is False
    assert result.error == NO_MATCHING_PAGES == "No pages found with the specified IDs"
    assert result.size == 0
    assert result.to_dict() == {
        "success": False,
        "format": "json",
        "size": 0,
        "error": "No pages found with the specified IDs",
    }


def test_page_export_without_ids_fails(editor_config_dict, assemble_options):
    result = export_schema(editor_config_dict, None, _options(assemble_options, format="page"))

    assert result.success is False
    assert result.error == NO_MATCHING_PAGES


def test_single_page_export_returns_bare_page(editor_config_dict, assemble_options):
    result = export_schema(
        editor_config_dict,
        None,
        _options(assemble_options, format="page", pageIds=["p2"]),
    )

    assert result.success is True
    assert isinstance(result.data, Page)
    assert result.data.id == "p2"


def test_single_page_export_ignores_active_flag(assemble_options):
    config = {"pages": [make_page("p1", isActive=False)]}

    result = export_schema(config, None, _options(assemble_options, format="page", pageIds=["p1"]))

    assert result.success is True
    assert result.data.id == "p1"


def test_multi_page_export_returns_app_with_selected_pages(assemble_options):
    config = {"pages": [make_page("p1"), make_page("p2"), make_page("p3")]}

    result = export_schema(
        config,
        None,
        _options(assemble_options, format="page", pageIds=["p3", "p1"]),
    )

    assert isinstance(result.data, MobileApp)
    # Source order, not request order
    assert [page.id for page in result.data.pages] == ["p1", "p3"]


def test_multi_page_export_rehashes_selection(assemble_options):
    config = {"pages": [make_page("p1"), make_page("p2"), make_page("p3")]}

    full = export_schema(config, None, _options(assemble_options)).data
    selected = export_schema(
        config,
        None,
        _options(assemble_options, format="page", pageIds=["p1", "p2"]),
    ).data

    assert selected.contentHash != full.contentHash


def test_component_export_flattens_top_level_widgets(editor_config_dict, assemble_options):
    result = export_schema(editor_config_dict, None, _options(assemble_options, format="component"))

    assert result.success is True
    container = result.data
    assert isinstance(container, Component)
    assert container.id == "export-container"
    assert container.type is ComponentType.CONTAINER
    assert container.name == "Exported Components"
    assert [child.id for child in container.children] == ["p1-w1", "p2-w1"]


def test_component_export_without_widgets_has_no_children(assemble_options):
    result = export_schema({"pages": [make_page("p1", components=[])]}, None,
                           _options(assemble_options, format="component"))

    assert result.success is True
    assert "children" not in result.data.to_dict()


def test_yaml_output(editor_config_dict, assemble_options):
    result = export_schema(editor_config_dict, None, _options(assemble_options, outputFormat="yaml"))

    assert result.success is True
    assert result.format == "yaml"
    text = serialize_schema(result.data, "yaml")
    assert yaml.safe_load(text) == result.data.to_dict()
    assert result.size == len(text)


def test_minified_json_is_compact(editor_config_dict, assemble_options):
    result = export_schema(editor_config_dict, None, _options(assemble_options, minify=True))

    text = serialize_schema(result.data, "json", minify=True)
    assert "\n" not in text
    assert result.size == len(text)
    assert json.loads(text) == result.data.to_dict()


def test_serialized_json_is_indented(editor_config_dict, assemble_options):
    result = export_schema(editor_config_dict, None, _options(assemble_options))

    assert serialize_schema(result.data).startswith('{\n  "schemaVersion"')


def test_invalid_options_become_failure_result(editor_config_dict):
    result = export_schema(editor_config_dict, None, {"format": "everything"})

    assert result.success is False
    assert result.error


def test_depth_overflow_becomes_failure_result(assemble_options, monkeypatch):
    from mobile_schema.config import settings

    monkeypatch.setattr(settings, "max_widget_depth", 1)
    config = {"pages": [make_page("p1", components=[
        {"id": "outer", "type": "container", "children": [{"id": "inner", "type": "text"}]},
    ])]}

    result = export_schema(config, None, _options(assemble_options))

    assert result.success is False
    assert "maximum nesting depth" in result.error


@pytest.mark.parametrize("algorithm", ["rolling32", "sha256"])
def test_title_with_truncated_surrogate_pair_exports(assemble_options, monkeypatch, algorithm):
    from mobile_schema.config import settings

    monkeypatch.setattr(settings, "content_hash_algorithm", algorithm)
    # JSON bodies can carry an unpaired \ud83d escape
    config = json.loads(
        '{"pages": [{"id": "p1", "name": "p1", "displayName": "Bad \\ud83d title", "components": []}]}'
    )

    result = export_schema(config, None, _options(assemble_options))

    assert result.success is True
    assert result.data.pages[0].title == "Bad \ud83d title"
    assert result.data.contentHash


def test_branding_dict_is_accepted(editor_config_dict, assemble_options):
    result = export_schema(editor_config_dict, {"primaryColor": "#111111"}, _options(assemble_options))

    assert result.data.theme.light.colors.primary == "#111111"


@pytest.mark.parametrize("app_name, output_format, expected", [
    ("Field Service", "json", "field-service-mobile-schema.json"),
    ("  My   App ", "yaml", "my-app-mobile-schema.yaml"),
    ("", "json", "app-mobile-schema.json"),
])
def test_export_filename(app_name, output_format, expected):
    assert export_filename(app_name, output_format) == expected
