from __future__ import annotations

import pytest
from pydantic import ValidationError

from kong_admin.admin_api.models import RouteDefinition, RouteList, VersionInfo


class TestRouteDefinition:
    def test_decodes_legacy_shape_and_ignores_created_at(self) -> None:
        route = RouteDefinition.model_validate(
            {
                "id": "4d924084-1adb-40a5-c042-63b19db421d1",
                "name": "kong-test-api",
                "request_path": "/kong-test-api",
                "strip_request_path": True,
                "upstream_url": "http://example.com",
                "preserve_host": False,
                "created_at": 1488830759000,
            }
        )
        assert route.id == "4d924084-1adb-40a5-c042-63b19db421d1"
        assert route.strip_request_path is True
        assert route.hosts is None
        assert not hasattr(route, "created_at")

    def test_decodes_modern_shape(self) -> None:
        route = RouteDefinition.model_validate(
            {
                "name": "example-api",
                "hosts": ["example.com", "www.example.com"],
                "uris": ["/v1"],
                "strip_uri": True,
                "upstream_url": "http://httpbin.org",
            }
        )
        assert route.hosts == ["example.com", "www.example.com"]
        assert route.uris == ["/v1"]
        assert route.preserve_host is False

    @pytest.mark.parametrize("empty", [{}, [], None])
    def test_empty_pattern_lists_decode_as_absent(self, empty) -> None:
        route = RouteDefinition.model_validate({"name": "x", "hosts": empty, "uris": empty})
        assert route.hosts is None
        assert route.uris is None

    def test_patterns_accept_sets_and_comma_separated_strings(self) -> None:
        route = RouteDefinition(name="x", hosts={"b.example.com", "a.example.com"}, uris="/a, /b")
        assert route.hosts == ["a.example.com", "b.example.com"]
        assert route.uris == ["/a", "/b"]

    def test_non_empty_object_for_patterns_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RouteDefinition.model_validate({"name": "x", "uris": {"0": "/a"}})

    def test_name_is_required(self) -> None:
        with pytest.raises(ValidationError):
            RouteDefinition.model_validate({"upstream_url": "http://example.com"})

    def test_create_payload_keeps_name_and_preserve_host_only_when_empty(self) -> None:
        assert RouteDefinition(name="bare").to_create_payload() == {"name": "bare", "preserve_host": False}

    def test_create_payload_omits_id_and_empty_strings(self) -> None:
        route = RouteDefinition(id="abc", name="x", upstream_url="", request_path="/x", request_host="", hosts=[])
        assert route.to_create_payload() == {"name": "x", "request_path": "/x", "preserve_host": False}

    def test_create_payload_keeps_explicit_false_flags(self) -> None:
        route = RouteDefinition(name="x", uris=["/x"], strip_uri=False, preserve_host=True)
        assert route.to_create_payload() == {
            "name": "x",
            "uris": ["/x"],
            "strip_uri": False,
            "preserve_host": True,
        }

    def test_assignment_is_validated(self) -> None:
        route = RouteDefinition(name="x")
        route.uris = {}
        assert route.uris is None
        with pytest.raises(ValidationError):
            route.preserve_host = "sometimes"


class TestRouteList:
    def test_decodes_page(self) -> None:
        routes = RouteList.model_validate(
            {
                "data": [{"name": "a", "uris": ["/a"]}, {"name": "b", "request_path": "/b"}],
                "total": 7,
                "next": "http://kong:8001/apis?offset=abc",
            }
        )
        assert routes.names() == ["a", "b"]
        assert routes.total == 7
        assert routes.find("b").request_path == "/b"

    def test_empty_object_data_and_missing_total(self) -> None:
        routes = RouteList.model_validate({"data": {}})
        assert routes.data == []
        assert routes.total == 0

    def test_total_defaults_to_page_size(self) -> None:
        routes = RouteList.model_validate({"data": [{"name": "a"}, {"name": "b"}]})
        assert routes.total == 2


class TestVersionInfo:
    def test_keeps_extra_fields(self) -> None:
        info = VersionInfo.model_validate({"version": "0.9.9", "hostname": "kong-1"})
        assert info.version == "0.9.9"
        assert info.model_extra == {"hostname": "kong-1"}

    @pytest.mark.parametrize("payload", [{}, {"version": None}, {"version": 10}])
    def test_version_must_be_a_string(self, payload) -> None:
        with pytest.raises(ValidationError):
            VersionInfo.model_validate(payload)
