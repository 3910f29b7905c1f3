"""
Mobile schema export endpoints.

POST /api/v1/mobile-schema/export          - ExportResult envelope
POST /api/v1/mobile-schema/export/download - serialized schema as a file
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from mobile_schema.models.schemas.input_output import ExportOptions, ExportResult
from mobile_schema.services.compilation.exporter import (
    export_filename,
    export_schema,
    serialize_schema,
)
from mobile_schema.utils.logging import get_logger, trace_async

router = APIRouter()
logger = get_logger(__name__)


MEDIA_TYPES = {
    "json": "application/json",
    "yaml": "application/x-yaml",
}


class ExportRequest(BaseModel):
    """Export request as posted by the web editor"""
    config: Dict[str, Any] = Field(default_factory=dict)
    branding: Optional[Dict[str, Any]] = None
    options: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "config": {
                    "spaceId": "space-1",
                    "pages": [
                        {
                            "id": "home",
                            "name": "home",
                            "displayName": "Home",
                            "components": [
                                {"id": "w1", "type": "text", "config": {"text": "Welcome"}}
                            ]
                        }
                    ]
                },
                "branding": {"primaryColor": "#111111"},
                "options": {
                    "appId": "field-service",
                    "appName": "Field Service",
                    "format": "full",
                    "outputFormat": "json"
                }
            }
        }
    )


def _failure_response(result: ExportResult) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=result.to_dict(),
    )


@router.post(
    "/mobile-schema/export",
    tags=["Export"],
    summary="Export mobile app schema",
    description="Compiles the editor document and returns the export envelope."
)
@trace_async("api.export")
async def export_mobile_schema(request: ExportRequest) -> JSONResponse:
    result = export_schema(request.config, request.branding, request.options)

    if not result.success:
        return _failure_response(result)

    return JSONResponse(content=result.to_dict())


@router.post(
    "/mobile-schema/export/download",
    tags=["Export"],
    summary="Download mobile app schema",
    description="Compiles the editor document and returns it as a JSON or YAML file."
)
@trace_async("api.export_download")
async def download_mobile_schema(request: ExportRequest) -> Response:
    result = export_schema(request.config, request.branding, request.options)

    if not result.success:
        return _failure_response(result)

    options = ExportOptions.model_validate(request.options)
    body = serialize_schema(result.data, options.output_format, options.minify)
    filename = export_filename(options.app_name, options.output_format)

    logger.info(
        "api.export.download_ready",
        extra={"filename": filename, "size": result.size}
    )

    return Response(
        content=body,
        media_type=MEDIA_TYPES[options.output_format],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
