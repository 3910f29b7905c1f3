"""
Options and result envelopes for the compiler entry points.
"""
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .app import MobileApp
from .components import Component
from .page import Page


ExportFormat = Literal["full", "page", "component"]
OutputFormat = Literal["json", "yaml"]


class AssembleOptions(BaseModel):
    """Identity and endpoint settings for an assembled app"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    app_id: str
    app_name: str
    app_version: str = "1.0.0"
    base_url: str = ""
    organization_id: Optional[str] = None
    updated_at: Optional[datetime] = Field(
        default=None,
        description="Generation timestamp; defaults to now"
    )


class ExportOptions(AssembleOptions):
    """What to export and how to serialize it"""
    format: ExportFormat = "full"
    page_ids: Optional[List[str]] = None
    output_format: OutputFormat = "json"
    minify: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "format": "page",
                "pageIds": ["page_home"],
                "outputFormat": "json",
                "minify": False,
                "appId": "app-space_1",
                "appName": "Field Service",
                "appVersion": "1.0.0",
                "baseUrl": "https://portal.example.com"
            }
        }
    )


class ExportResult(BaseModel):
    """Outcome of an export; failures are reported here, never raised"""
    success: bool
    data: Optional[Union[MobileApp, Page, Component]] = None
    format: OutputFormat = "json"
    size: int = 0
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
