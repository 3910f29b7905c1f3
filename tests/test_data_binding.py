"""Tests for the data binding builder and templates."""
import re

import pytest

from mobile_schema.services.data_binding import (
    DataBindingError,
    DataBindingTemplates,
    DataSourceBuilder,
)


class TestDataSourceBuilder:
    """DataSourceBuilder fluent API"""

    def test_build_requires_type(self):
        with pytest.raises(DataBindingError, match="type is required"):
            DataSourceBuilder().source("/x").build()

    def test_build_requires_source(self):
        with pytest.raises(DataBindingError, match="source is required"):
            DataSourceBuilder().type("api").build()

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            DataSourceBuilder().build()

    def test_generated_id(self):
        binding = DataSourceBuilder().type("static").source("countries").build()

        assert re.fullmatch(r"binding-[0-9a-f]{8}", binding.id)

    def test_explicit_id(self):
        assert DataSourceBuilder("orders").type("api").source("/o").build().id == "orders"

    def test_full_chain(self):
        binding = (
            DataSourceBuilder("orders")
            .type("api")
            .source("/api/orders")
            .method("post")
            .headers({"X-Tenant": "acme"})
            .body({"status": "open"})
            .response_path("data.items")
            .cache(300)
            .refresh_every(10_000)
            .transform("toOrderRows")
            .build()
        )

        assert binding.to_dict() == {
            "id": "orders",
            "type": "api",
            "source": "/api/orders",
            "method": "POST",
            "headers": {"X-Tenant": "acme"},
            "body": {"status": "open"},
            "responsePath": "data.items",
            "transform": "toOrderRows",
            "refreshInterval": 10000,
            "cache": True,
            "cacheTTL": 300,
        }

    def test_cache_without_ttl(self):
        binding = DataSourceBuilder().type("api").source("/x").cache().build()

        assert binding.cache is True
        assert binding.cacheTTL is None

    @pytest.mark.parametrize("method, kind, param_field, param", [
        ("paginate_offset", "offset", "offsetParam", "offset"),
        ("paginate_page", "page", "pageParam", "page"),
        ("paginate_cursor", "cursor", "cursorParam", "cursor"),
    ])
    def test_pagination_strategies(self, method, kind, param_field, param):
        builder = DataSourceBuilder().type("api").source("/x")
        getattr(builder, method)(25)

        pagination = builder.build().pagination

        assert pagination.type == kind
        assert pagination.pageSize == 25
        assert getattr(pagination, param_field) == param
        assert pagination.limitParam == "limit"

    def test_last_pagination_wins(self):
        binding = (
            DataSourceBuilder().type("api").source("/x")
            .paginate_page(10)
            .paginate_cursor(50, cursor_param="after")
            .build()
        )

        assert binding.pagination.type == "cursor"
        assert binding.pagination.cursorParam == "after"
        assert binding.pagination.pageParam is None


class TestDataBindingTemplates:
    """Canned bindings for data model screens"""

    def test_list_records(self):
        binding = DataBindingTemplates.list_records("customers", page_size=50)

        assert binding.id == "customers-list"
        assert binding.source == "/api/data-models/customers/records"
        assert binding.method == "GET"
        assert binding.responsePath == "data"
        assert binding.pagination.type == "page"
        assert binding.pagination.pageSize == 50
        assert binding.cache is True

    def test_record_detail(self):
        binding = DataBindingTemplates.record_detail("customers")

        assert binding.source == "/api/data-models/customers/records/:id"
        assert binding.method == "GET"

    def test_create_and_update_forms(self):
        create = DataBindingTemplates.create_form("customers")
        update = DataBindingTemplates.update_form("customers", id_param="customerId")

        assert (create.method, create.source) == ("POST", "/api/data-models/customers/records")
        assert (update.method, update.source) == (
            "PUT", "/api/data-models/customers/records/:customerId",
        )
        assert create.headers == {"Content-Type": "application/json"}

    def test_search(self):
        binding = DataBindingTemplates.search("customers", query_param="q")

        assert binding.source == "/api/data-models/customers/records?q=:query"
        assert binding.pagination.type == "cursor"

    def test_static_context_and_parameter(self):
        static = DataBindingTemplates.static("countries", data=["NO", "SE"])
        context = DataBindingTemplates.context("user.profile")
        parameter = DataBindingTemplates.parameter("orderId")

        assert (static.type, static.source, static.body) == ("static", "countries", ["NO", "SE"])
        assert (context.type, context.source) == ("context", "user.profile")
        assert (parameter.type, parameter.source) == ("parameter", "orderId")
