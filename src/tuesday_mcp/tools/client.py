"""Async HTTP client for the Tuesday REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from tuesday_mcp.errors import TransportError
from tuesday_mcp.tools.schemas import (
    CheckApiKeyInput,
    GetCompanyProfileInput,
    GetEmployeeCountInput,
    GetPersonProfileInput,
    ListEnvelope,
    LookupPersonByEmailInput,
    LookupPersonByPhoneInput,
    LookupPersonInput,
    SearchCompaniesInput,
    SearchEmployeesInput,
    SearchPeopleInput,
    SingleEnvelope,
    ToolInput,
)

DEFAULT_BASE_URL = "https://api.tuesday.so/api/v1"

logger = logging.getLogger(__name__)


class TuesdayClient:
    """One API key, one ``httpx.AsyncClient``.

    Lookups are sent as GET with the arguments in the query string, searches as
    POST with the arguments as the JSON body. Every call is a single attempt.
    Use as ``async with TuesdayClient(key) as client: ...``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={
                "X-API-KEY": api_key,
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def __aenter__(self) -> TuesdayClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # -------- AUTH --------

    async def check_api_key(self, payload: CheckApiKeyInput | None = None) -> SingleEnvelope:
        _ = payload
        return SingleEnvelope.model_validate(await self._get("/public/auth"))

    # -------- PEOPLE --------

    async def search_people(self, payload: SearchPeopleInput) -> ListEnvelope:
        return ListEnvelope.model_validate(await self._post("/people/search", payload))

    async def lookup_person(self, payload: LookupPersonInput) -> SingleEnvelope:
        return SingleEnvelope.model_validate(await self._get("/people/lookup", payload))

    async def lookup_person_by_email(self, payload: LookupPersonByEmailInput) -> SingleEnvelope:
        return SingleEnvelope.model_validate(await self._get("/people/lookup/email", payload))

    async def lookup_person_by_phone(self, payload: LookupPersonByPhoneInput) -> SingleEnvelope:
        return SingleEnvelope.model_validate(await self._get("/people/lookup/phone", payload))

    async def get_person_profile(self, payload: GetPersonProfileInput) -> SingleEnvelope:
        return SingleEnvelope.model_validate(await self._get("/people/profile", payload))

    # -------- COMPANIES --------

    async def search_companies(self, payload: SearchCompaniesInput) -> ListEnvelope:
        return ListEnvelope.model_validate(await self._post("/company/search", payload))

    async def get_company_profile(self, payload: GetCompanyProfileInput) -> SingleEnvelope:
        return SingleEnvelope.model_validate(await self._get("/company/profile", payload))

    async def get_employee_count(self, payload: GetEmployeeCountInput) -> SingleEnvelope:
        return SingleEnvelope.model_validate(
            await self._get("/company/employees/count", payload)
        )

    async def search_employees(self, payload: SearchEmployeesInput) -> ListEnvelope:
        return ListEnvelope.model_validate(
            await self._post("/company/employees/search", payload)
        )

    async def _get(self, path: str, payload: ToolInput | None = None) -> Any:
        params = payload.to_params() if payload is not None else None
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, payload: ToolInput) -> Any:
        return await self._request("POST", path, json_body=payload.to_params())

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        response = await self._http.request(method, path, params=params, json=json_body)
        logger.debug(
            "tuesday_request method=%s path=%s status=%d",
            method,
            path,
            response.status_code,
        )
        if not response.is_success:
            raise TransportError(response.status_code, _error_detail(response))
        return response.json()


def _error_detail(response: httpx.Response) -> str:
    """Prefer the envelope's ``message``; fall back to the reason phrase."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase or f"HTTP {response.status_code}"
