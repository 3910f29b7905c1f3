"""
Data binding descriptors telling a client how to fetch or reference data.
"""
from typing import Any, Dict, Literal, Optional
from pydantic import Field

from .core import SchemaModel


DataSourceType = Literal["api", "static", "context", "parameter"]
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
PaginationType = Literal["offset", "page", "cursor"]


class Pagination(SchemaModel):
    """Pagination strategy for list endpoints"""
    type: PaginationType
    pageSize: int = Field(..., gt=0)
    pageParam: Optional[str] = None
    limitParam: Optional[str] = None
    offsetParam: Optional[str] = None
    cursorParam: Optional[str] = None


class DataBinding(SchemaModel):
    """
    Binding between a component and a data source.

    `source` means different things per type: an endpoint for `api`, a key
    into bundled data for `static`, a state path for `context` and a route
    parameter name for `parameter`.
    """
    id: str
    type: DataSourceType
    source: Optional[str] = None
    method: Optional[HttpMethod] = None
    headers: Optional[Dict[str, str]] = None
    body: Optional[Any] = None
    responsePath: Optional[str] = None
    transform: Optional[str] = None
    refreshInterval: Optional[int] = Field(default=None, ge=0, description="Milliseconds, 0 disables")
    cache: Optional[bool] = None
    cacheTTL: Optional[int] = Field(default=None, ge=0, description="Seconds")
    pagination: Optional[Pagination] = None
