"""
Canned data bindings for common screens backed by a named data model.

Endpoints follow the platform's record API:

    /api/data-models/<model>/records        list, create
    /api/data-models/<model>/records/:id    detail, update
"""
from typing import Any, Optional

from mobile_schema.models.schemas.data_binding import DataBinding
from mobile_schema.services.data_binding.builder import DataSourceBuilder


DATA_MODELS_API = "/api/data-models"


class DataBindingTemplates:
    """Factory methods returning ready-to-use DataBinding objects"""

    @staticmethod
    def records_endpoint(model: str) -> str:
        return f"{DATA_MODELS_API}/{model}/records"

    @staticmethod
    def record_endpoint(model: str, id_param: str = "id") -> str:
        return f"{DATA_MODELS_API}/{model}/records/:{id_param}"

    @classmethod
    def list_records(cls, model: str, page_size: int = 20, cache_ttl: int = 60) -> DataBinding:
        """Paged record list, cached briefly"""
        return (
            DataSourceBuilder(f"{model}-list")
            .type("api")
            .source(cls.records_endpoint(model))
            .method("GET")
            .response_path("data")
            .paginate_page(page_size)
            .cache(cache_ttl)
            .build()
        )

    @classmethod
    def record_detail(cls, model: str, id_param: str = "id", cache_ttl: int = 60) -> DataBinding:
        return (
            DataSourceBuilder(f"{model}-detail")
            .type("api")
            .source(cls.record_endpoint(model, id_param))
            .method("GET")
            .response_path("data")
            .cache(cache_ttl)
            .build()
        )

    @classmethod
    def create_form(cls, model: str) -> DataBinding:
        return (
            DataSourceBuilder(f"{model}-create")
            .type("api")
            .source(cls.records_endpoint(model))
            .method("POST")
            .headers({"Content-Type": "application/json"})
            .response_path("data")
            .build()
        )

    @classmethod
    def update_form(cls, model: str, id_param: str = "id") -> DataBinding:
        return (
            DataSourceBuilder(f"{model}-update")
            .type("api")
            .source(cls.record_endpoint(model, id_param))
            .method("PUT")
            .headers({"Content-Type": "application/json"})
            .response_path("data")
            .build()
        )

    @classmethod
    def search(
        cls,
        model: str,
        query_param: str = "search",
        page_size: int = 20,
    ) -> DataBinding:
        """Free-text search; the client fills `:query` from the search box"""
        return (
            DataSourceBuilder(f"{model}-search")
            .type("api")
            .source(f"{cls.records_endpoint(model)}?{query_param}=:query")
            .method("GET")
            .response_path("data")
            .paginate_cursor(page_size)
            .build()
        )

    @staticmethod
    def static(key: str, data: Optional[Any] = None) -> DataBinding:
        builder = DataSourceBuilder(f"static-{key}").type("static").source(key)
        if data is not None:
            builder.body(data)
        return builder.build()

    @staticmethod
    def context(path: str) -> DataBinding:
        return DataSourceBuilder(f"context-{path}").type("context").source(path).build()

    @staticmethod
    def parameter(name: str) -> DataBinding:
        return DataSourceBuilder(f"param-{name}").type("parameter").source(name).build()
