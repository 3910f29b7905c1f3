"""Widget type catalog API endpoints."""
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from typing import Any, Dict

from mobile_schema.models.schemas.component_catalog import export_widget_type_catalog

router = APIRouter()


@router.get(
    "/components",
    tags=["Components"],
    summary="Get widget type catalog",
    description="Returns the component types, the widget type mapping and the category groups."
)
async def get_component_catalog() -> Dict[str, Any]:
    return export_widget_type_catalog()


@router.get(
    "/components/export",
    tags=["Components"],
    summary="Export widget type catalog as JSON",
    description="Downloads the widget type catalog as a JSON file."
)
async def export_component_catalog() -> JSONResponse:
    response = JSONResponse(content=export_widget_type_catalog())
    response.headers["Content-Disposition"] = 'attachment; filename="widget_type_catalog.json"'
    return response
