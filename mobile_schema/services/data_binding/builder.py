"""
Fluent builder for DataBinding descriptors.

    binding = (
        DataSourceBuilder("orders")
        .type("api")
        .source("/api/data-models/orders/records")
        .cache(300)
        .paginate_page(25)
        .build()
    )

`build()` requires that both `type` and `source` were set.
"""
from typing import Any, Dict, Optional
from uuid import uuid4

from loguru import logger

from mobile_schema.models.schemas.data_binding import DataBinding, Pagination


class DataBindingError(ValueError):
    """Builder finalized without a required field"""
    pass


class DataSourceBuilder:
    """Assembles a DataBinding field by field"""

    def __init__(self, binding_id: Optional[str] = None):
        self._id = binding_id or f"binding-{uuid4().hex[:8]}"
        self._fields: Dict[str, Any] = {}

    def type(self, source_type: str) -> "DataSourceBuilder":
        self._fields["type"] = source_type
        return self

    def source(self, source: str) -> "DataSourceBuilder":
        self._fields["source"] = source
        return self

    def method(self, method: str) -> "DataSourceBuilder":
        self._fields["method"] = method.upper()
        return self

    def headers(self, headers: Dict[str, str]) -> "DataSourceBuilder":
        self._fields["headers"] = dict(headers)
        return self

    def body(self, body: Any) -> "DataSourceBuilder":
        self._fields["body"] = body
        return self

    def response_path(self, path: str) -> "DataSourceBuilder":
        self._fields["responsePath"] = path
        return self

    def cache(self, ttl: Optional[int] = None) -> "DataSourceBuilder":
        """Enable response caching, optionally with a TTL in seconds"""
        self._fields["cache"] = True
        if ttl is not None:
            self._fields["cacheTTL"] = ttl
        return self

    def refresh_every(self, interval_ms: int) -> "DataSourceBuilder":
        self._fields["refreshInterval"] = interval_ms
        return self

    def paginate_offset(
        self,
        page_size: int,
        offset_param: str = "offset",
        limit_param: str = "limit",
    ) -> "DataSourceBuilder":
        self._fields["pagination"] = Pagination(
            type="offset",
            pageSize=page_size,
            offsetParam=offset_param,
            limitParam=limit_param,
        )
        return self

    def paginate_page(
        self,
        page_size: int,
        page_param: str = "page",
        limit_param: str = "limit",
    ) -> "DataSourceBuilder":
        self._fields["pagination"] = Pagination(
            type="page",
            pageSize=page_size,
            pageParam=page_param,
            limitParam=limit_param,
        )
        return self

    def paginate_cursor(
        self,
        page_size: int,
        cursor_param: str = "cursor",
        limit_param: str = "limit",
    ) -> "DataSourceBuilder":
        self._fields["pagination"] = Pagination(
            type="cursor",
            pageSize=page_size,
            cursorParam=cursor_param,
            limitParam=limit_param,
        )
        return self

    def transform(self, name: str) -> "DataSourceBuilder":
        self._fields["transform"] = name
        return self

    def build(self) -> DataBinding:
        """
        Finalize the binding.

        Raises:
            DataBindingError: If type or source was never set
        """
        if not self._fields.get("type"):
            raise DataBindingError("Data binding type is required")
        if not self._fields.get("source"):
            raise DataBindingError("Data binding source is required")

        binding = DataBinding(id=self._id, **self._fields)
        logger.debug(f"Built data binding {binding.id} ({binding.type} {binding.source})")
        return binding
