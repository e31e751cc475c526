"""Tool registry: one dispatch entry per Tuesday tool."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Awaitable, Callable

from pydantic import ValidationError as PydanticValidationError

from tuesday_mcp.errors import UnknownToolError, ValidationError
from tuesday_mcp.tools import formatting
from tuesday_mcp.tools.client import TuesdayClient
from tuesday_mcp.tools.schemas import (
    CheckApiKeyInput,
    Envelope,
    GetCompanyProfileInput,
    GetEmployeeCountInput,
    GetPersonProfileInput,
    LookupPersonByEmailInput,
    LookupPersonByPhoneInput,
    LookupPersonInput,
    SearchCompaniesInput,
    SearchEmployeesInput,
    SearchPeopleInput,
    ToolInput,
)

Operation = Callable[[TuesdayClient, Any], Awaitable[Envelope]]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_model: type[ToolInput]
    operation: Operation
    formatter: formatting.Formatter

    def validate(self, raw_arguments: Any) -> ToolInput:
        try:
            return self.input_model.model_validate(raw_arguments)
        except PydanticValidationError as exc:
            raise ValidationError(self.name, _violations(exc)) from exc


def build_registry() -> dict[str, ToolSpec]:
    specs = [
        ToolSpec(
            name="check_api_key",
            description="Validate your Tuesday API key and retrieve workspace information",
            input_model=CheckApiKeyInput,
            operation=TuesdayClient.check_api_key,
            formatter=formatting.workspace_summary,
        ),
        ToolSpec(
            name="search_people",
            description="Search for people using advanced filters and criteria",
            input_model=SearchPeopleInput,
            operation=TuesdayClient.search_people,
            formatter=formatting.paged("people"),
        ),
        ToolSpec(
            name="lookup_person",
            description="Find a person using name, company, and other identifying information",
            input_model=LookupPersonInput,
            operation=TuesdayClient.lookup_person,
            formatter=formatting.labeled("Person found"),
        ),
        ToolSpec(
            name="lookup_person_by_email",
            description="Find a person using their email address",
            input_model=LookupPersonByEmailInput,
            operation=TuesdayClient.lookup_person_by_email,
            formatter=formatting.labeled("Person found by email"),
        ),
        ToolSpec(
            name="lookup_person_by_phone",
            description="Find a person using their phone number",
            input_model=LookupPersonByPhoneInput,
            operation=TuesdayClient.lookup_person_by_phone,
            formatter=formatting.labeled("Person found by phone"),
        ),
        ToolSpec(
            name="get_person_profile",
            description=(
                "Get comprehensive profile information for a person using their LinkedIn URL"
            ),
            input_model=GetPersonProfileInput,
            operation=TuesdayClient.get_person_profile,
            formatter=formatting.labeled("Person profile"),
        ),
        ToolSpec(
            name="search_companies",
            description=(
                "Search for companies using advanced filters including industry, size, "
                "location, and more"
            ),
            input_model=SearchCompaniesInput,
            operation=TuesdayClient.search_companies,
            formatter=formatting.paged("companies"),
        ),
        ToolSpec(
            name="get_company_profile",
            description=(
                "Get comprehensive company information using LinkedIn URL or domain "
                "(provide at least one of linkedin_url or domain)"
            ),
            input_model=GetCompanyProfileInput,
            operation=TuesdayClient.get_company_profile,
            formatter=formatting.labeled("Company profile"),
        ),
        ToolSpec(
            name="get_employee_count",
            description=(
                "Get employee count and headcount information for a company "
                "(provide at least one of linkedin_url or domain)"
            ),
            input_model=GetEmployeeCountInput,
            operation=TuesdayClient.get_employee_count,
            formatter=formatting.labeled("Employee count"),
        ),
        ToolSpec(
            name="search_employees",
            description=(
                "Search for employees within a specific company "
                "(provide at least one of company_domain or linkedin_url)"
            ),
            input_model=SearchEmployeesInput,
            operation=TuesdayClient.search_employees,
            formatter=formatting.paged("employees"),
        ),
    ]
    return {spec.name: spec for spec in specs}


@lru_cache(maxsize=1)
def get_registry() -> dict[str, ToolSpec]:
    return build_registry()


def validate_arguments(
    tool_name: str,
    raw_arguments: Any,
    *,
    registry: dict[str, ToolSpec] | None = None,
) -> ToolInput:
    specs = registry if registry is not None else get_registry()
    spec = specs.get(tool_name)
    if spec is None:
        raise UnknownToolError(tool_name)
    return spec.validate(raw_arguments)


def _violations(exc: PydanticValidationError) -> list[str]:
    lines: list[str] = []
    for item in exc.errors():
        location = ".".join(str(part) for part in item["loc"])
        message = item["msg"].removeprefix("Value error, ")
        lines.append(f"{location}: {message}" if location else message)
    return lines
