from __future__ import annotations

import asyncio
import json

import pytest

from tuesday_mcp.errors import (
    MissingCredentialError,
    TransportError,
    UnexpectedError,
    UnknownToolError,
    ValidationError,
)
from tuesday_mcp.tools.catalog import build_catalog
from tuesday_mcp.tools.gateway import ToolDispatcher
from tuesday_mcp.tools.registry import build_registry


def test_lookup_by_email_end_to_end(stub_api, dispatcher) -> None:
    stub_api.respond(
        "GET",
        "/people/lookup/email",
        json_body={"data": {"id": "1", "name": "A"}, "statusCode": 200, "message": "Success"},
    )

    text = asyncio.run(dispatcher.invoke("lookup_person_by_email", {"email": "a@b.com"}))

    assert text.startswith("Person found by email:\n\n")
    assert json.dumps({"id": "1", "name": "A"}, indent=2) in text
    request = stub_api.requests[0]
    assert request.headers["X-API-KEY"] == "env-key"
    assert dict(request.url.params) == {"email": "a@b.com", "include_phone": "exclude"}


def test_search_result_reports_count_and_page(stub_api, dispatcher) -> None:
    stub_api.respond(
        "POST",
        "/company/employees/search",
        status_code=201,
        json_body={"data": [{"id": "e1"}, {"id": "e2"}], "statusCode": 201},
    )

    text = asyncio.run(
        dispatcher.invoke("search_employees", {"company_domain": "acme.io", "page": 3})
    )

    assert text.startswith("Found 2 employees (Page 3):\n\n")
    assert '"id": "e2"' in text


def test_check_api_key_summarizes_workspace(stub_api, dispatcher) -> None:
    stub_api.respond(
        "GET",
        "/public/auth",
        json_body={"data": {"id": "w1", "name": "Acme", "user_id": "u9"}, "statusCode": 200},
    )

    text = asyncio.run(dispatcher.invoke("check_api_key", {}))

    assert text == "API Key validated successfully!\n\nWorkspace: Acme\nID: w1\nUser ID: u9"


def test_per_call_api_key_overrides_fallback(stub_api, dispatcher) -> None:
    stub_api.respond(
        "GET",
        "/company/employees/count",
        json_body={"data": {"count": 42}, "statusCode": 200},
    )

    text = asyncio.run(
        dispatcher.invoke("get_employee_count", {"domain": "acme.io", "api_key": "call-key"})
    )

    request = stub_api.requests[0]
    assert request.headers["X-API-KEY"] == "call-key"
    assert "api_key" not in dict(request.url.params)
    assert "call-key" not in text
    assert text.startswith("Employee count:")


def test_missing_credential_fails_before_any_request(stub_api) -> None:
    dispatcher = ToolDispatcher(fallback_api_key="", transport=stub_api.transport)

    with pytest.raises(MissingCredentialError):
        asyncio.run(dispatcher.invoke("lookup_person_by_email", {"email": "a@b.com"}))
    with pytest.raises(MissingCredentialError):
        asyncio.run(dispatcher.invoke("search_people", {"api_key": "  "}))

    assert stub_api.requests == []


def test_unknown_tool_is_distinct_from_other_failures(stub_api, dispatcher) -> None:
    with pytest.raises(UnknownToolError):
        asyncio.run(dispatcher.invoke("export_everything", {}))

    assert stub_api.requests == []


def test_validation_failure_skips_network(stub_api, dispatcher) -> None:
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(dispatcher.invoke("get_company_profile", {"include_contacts": "include"}))

    assert "Either linkedin_url or domain is required" in exc_info.value.message
    assert stub_api.requests == []


def test_non_string_api_key_is_a_validation_failure(stub_api, dispatcher) -> None:
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(dispatcher.invoke("search_people", {"api_key": 12345}))

    assert exc_info.value.violations == ["api_key: must be a string"]


def test_transport_error_message_is_preserved(stub_api, dispatcher) -> None:
    stub_api.respond(
        "GET",
        "/people/profile",
        status_code=402,
        json_body={"message": "Insufficient credits", "statusCode": 402},
    )

    with pytest.raises(TransportError) as exc_info:
        asyncio.run(
            dispatcher.invoke(
                "get_person_profile",
                {"linkedin_url": "https://www.linkedin.com/in/ada"},
            )
        )

    assert exc_info.value.message == "API request failed: 402 - Insufficient credits"


def test_unexpected_payload_shape_is_wrapped(stub_api, dispatcher) -> None:
    stub_api.respond(
        "POST",
        "/people/search",
        status_code=201,
        json_body={"data": {"not": "a list"}, "statusCode": 201},
    )

    with pytest.raises(UnexpectedError) as exc_info:
        asyncio.run(dispatcher.invoke("search_people", {}))

    assert exc_info.value.message


def test_non_json_success_body_is_wrapped(stub_api, dispatcher) -> None:
    stub_api.respond("GET", "/public/auth", text="OK")

    with pytest.raises(UnexpectedError):
        asyncio.run(dispatcher.invoke("check_api_key", {}))


def test_dispatcher_refuses_registry_catalog_drift() -> None:
    registry = build_registry()
    catalog = build_catalog(registry)
    registry.pop("search_employees")

    with pytest.raises(RuntimeError, match="drifted"):
        ToolDispatcher(fallback_api_key="k", registry=registry, catalog=catalog)


def test_concurrent_invocations_do_not_share_credentials(stub_api, dispatcher) -> None:
    stub_api.respond(
        "GET",
        "/people/lookup/phone",
        json_body={"data": {"id": "p"}, "statusCode": 200},
    )

    async def _run():
        return await asyncio.gather(
            dispatcher.invoke("lookup_person_by_phone", {"phone": "1", "api_key": "key-a"}),
            dispatcher.invoke("lookup_person_by_phone", {"phone": "2", "api_key": "key-b"}),
        )

    results = asyncio.run(_run())

    assert all(text.startswith("Person found by phone:") for text in results)
    sent = sorted(
        (request.url.params["phone"], request.headers["X-API-KEY"])
        for request in stub_api.requests
    )
    assert sent == [("1", "key-a"), ("2", "key-b")]
