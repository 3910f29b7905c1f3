"""
Export Pipeline - scope selection, serialization and the failure boundary.

`export_schema` never raises: every failure comes back as
ExportResult(success=False, error=...).
"""
import json
import re
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel

from mobile_schema.config import settings
from mobile_schema.models.schemas.app import MobileApp
from mobile_schema.models.schemas.components import Component
from mobile_schema.models.schemas.core import ComponentType
from mobile_schema.models.schemas.editor import BrandingConfig, EditorConfig
from mobile_schema.models.schemas.input_output import ExportOptions, ExportResult
from mobile_schema.models.schemas.page import Page
from mobile_schema.services.compilation.app_assembler import assemble_app, with_content_hash
from mobile_schema.services.compilation.component_converter import convert_widget
from mobile_schema.services.compilation.page_converter import convert_page
from mobile_schema.utils.logging import get_logger

logger = get_logger(__name__)


class ExportError(Exception):
    """Export request cannot be satisfied"""
    pass


NO_MATCHING_PAGES = "No pages found with the specified IDs"
UNKNOWN_EXPORT_ERROR = "Unknown error during export"

EXPORT_CONTAINER_ID = "export-container"
EXPORT_CONTAINER_NAME = "Exported Components"

SchemaDocument = Union[MobileApp, Page, Component]


def _coerce(model, value):
    if value is None or isinstance(value, model):
        return value
    return model.model_validate(value)


def serialize_schema(
    data: Union[SchemaDocument, Dict[str, Any]],
    output_format: str = "json",
    minify: bool = False,
) -> str:
    """
    Serialize a schema document.

    JSON is indented unless minified. YAML uses block style, or flow style
    when minified.
    """
    content = data.model_dump(mode="json", exclude_none=True) if isinstance(data, BaseModel) else data

    if output_format == "yaml":
        return yaml.safe_dump(
            content,
            default_flow_style=minify,
            sort_keys=False,
            allow_unicode=True,
            width=float("inf") if minify else 80,
        )

    if minify:
        return json.dumps(content, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(content, indent=settings.default_indent, ensure_ascii=False)


def export_filename(app_name: str, output_format: str = "json") -> str:
    """Download file name, e.g. 'field-service-mobile-schema.json'"""
    slug = re.sub(r"\s+", "-", app_name.strip().lower()) or "app"
    return f"{slug}-mobile-schema.{output_format}"


def _export_pages(
    config: EditorConfig,
    branding: Optional[BrandingConfig],
    options: ExportOptions,
) -> SchemaDocument:
    page_ids = set(options.page_ids or [])
    matched = [page for page in config.pages if page.id in page_ids]

    if not matched:
        raise ExportError(NO_MATCHING_PAGES)

    if len(matched) == 1:
        return convert_page(matched[0])

    # Several pages: a full app restricted to the selection
    app = assemble_app(config, branding, options)
    return with_content_hash(app.model_copy(update={
        "pages": [convert_page(page) for page in matched],
    }))


def _export_components(config: EditorConfig) -> Component:
    children = [
        convert_widget(widget)
        for page in config.pages
        for widget in page.components
    ]
    return Component(
        id=EXPORT_CONTAINER_ID,
        type=ComponentType.CONTAINER,
        name=EXPORT_CONTAINER_NAME,
        children=children or None,
    )


def export_schema(
    config: Union[EditorConfig, Dict[str, Any]],
    branding: Union[BrandingConfig, Dict[str, Any], None],
    options: Union[ExportOptions, Dict[str, Any]],
) -> ExportResult:
    """
    Export the whole app, selected pages or a flat component list.

    Args:
        config: Page-builder document (model or raw dict)
        branding: Branding configuration (model, raw dict or None)
        options: Export options (model or raw dict)

    Returns:
        ExportResult; check `success` rather than catching exceptions
    """
    output_format = "json"
    try:
        options = _coerce(ExportOptions, options)
        output_format = options.output_format
        config = _coerce(EditorConfig, config)
        branding = _coerce(BrandingConfig, branding)

        if options.format == "full":
            data = assemble_app(config, branding, options)
        elif options.format == "page":
            data = _export_pages(config, branding, options)
        else:
            data = _export_components(config)

        serialized = serialize_schema(data, output_format, options.minify)

        logger.info(
            "exporter.completed",
            extra={
                "format": options.format,
                "output_format": output_format,
                "size": len(serialized),
            }
        )

        return ExportResult(
            success=True,
            data=data,
            format=output_format,
            size=len(serialized),
        )

    except ExportError as e:
        logger.warning("exporter.rejected", extra={"reason": str(e)})
        return ExportResult(success=False, format=output_format, size=0, error=str(e))

    except Exception as e:
        logger.error(
            "exporter.failed",
            extra={"error_type": type(e).__name__},
            exc_info=e
        )
        return ExportResult(
            success=False,
            format=output_format,
            size=0,
            error=str(e) or UNKNOWN_EXPORT_ERROR,
        )
