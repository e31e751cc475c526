"""Pydantic argument schemas for the Tuesday tools, built from shared fragments."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    HttpUrl,
    TypeAdapter,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError

Toggle = Literal["include", "exclude"]
Number = int | float

_HTTP_URL: TypeAdapter[HttpUrl] = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    try:
        _HTTP_URL.validate_python(value)
    except PydanticValidationError as exc:
        raise ValueError("must be a valid URL") from exc
    # forwarded as given, not as the normalized HttpUrl
    return value


Url = Annotated[str, AfterValidator(_check_url)]
NonEmptyStr = Annotated[str, Field(min_length=1)]
Rating = Annotated[float, Field(ge=1, le=5)]
StrList = list[str]


class ToolInput(BaseModel):
    """Base model for normalized tool arguments.

    Unknown keys (``api_key`` included) are dropped rather than rejected, so
    the normalized record only carries what the remote endpoint accepts.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


# -------- SHARED FRAGMENTS --------


class RangeFilter(ToolInput):
    min: Number | None = None
    max: Number | None = None


class RatingRange(ToolInput):
    min: Rating | None = None
    max: Rating | None = None


class DepartmentRangeFilter(ToolInput):
    department: str
    range: RangeFilter


class PaginationFields(ToolInput):
    page: int = Field(default=1, ge=1, description="Page number (default: 1)")
    per_page: int = Field(
        default=25,
        ge=1,
        le=100,
        description="Results per page (max: 100, default: 25)",
    )


class ContactInclusionFields(ToolInput):
    include_email: Toggle = Field(
        default="exclude",
        description="Include email addresses (+2 credits per result)",
    )
    include_phone: Toggle = Field(
        default="exclude",
        description="Include phone numbers (+3 credits per result)",
    )


class CorePersonFilters(ToolInput):
    person_titles: StrList | None = Field(default=None, description="Current job titles to include")
    person_not_titles: StrList | None = Field(
        default=None, description="Exclude these current job titles"
    )
    person_seniorities: StrList | None = Field(default=None, description="Filter by seniority level")
    person_location: StrList | None = Field(default=None, description="Current person location")
    not_person_location: StrList | None = Field(
        default=None, description="Exclude people in these locations"
    )


class PersonFilters(CorePersonFilters):
    person_past_titles: StrList | None = Field(
        default=None, description="Match against past job titles"
    )
    person_days_in_current_title_range: RangeFilter | None = Field(
        default=None, description="Days spent in the current title"
    )


class FirmographicFilters(ToolInput):
    q_organization_domains: StrList | None = Field(
        default=None, description="Match organization domains"
    )
    not_q_organization_domains: StrList | None = Field(
        default=None, description="Exclude organizations with these domains"
    )
    organization_location: StrList | None = Field(default=None, description="Company HQ/location")
    not_organization_location: StrList | None = Field(
        default=None, description="Exclude companies in these locations"
    )
    organization_industry: StrList | None = None
    organization_not_industry: StrList | None = None
    organization_sic_industry: StrList | None = None
    organization_not_sic_industry: StrList | None = None
    organization_naics_industry: StrList | None = None
    organization_not_naics_industry: StrList | None = None
    organization_revenue_ranges: StrList | None = None


class TechnologyFilters(ToolInput):
    organization_technology: StrList | None = None
    organization_all_technology: StrList | None = None
    not_organization_technology: StrList | None = None
    organization_has_web_app: bool | None = None
    organization_has_mobile_app: bool | None = None
    organization_appstore_app_category: StrList | None = None
    organization_playstore_app_category: StrList | None = None
    organization_appstore_rating: RatingRange | None = None
    organization_playstore_rating: RatingRange | None = None
    organization_appstore_review_count: RangeFilter | None = None
    organization_playstore_review_count: RangeFilter | None = None
    organization_is_website_for_sale: bool | None = None


class WebTrafficFilters(ToolInput):
    organization_website_traffic_total_monthly: RangeFilter | None = None
    organization_website_traffic_monthly_organic: RangeFilter | None = None
    organization_website_traffic_monthly_paid: RangeFilter | None = None
    organization_monthly_google_adspend: RangeFilter | None = None


class FundingFilters(ToolInput):
    organization_funding_amount: RangeFilter | None = None
    organization_funding_total_amount: RangeFilter | None = None
    organization_funding_date: RangeFilter | None = None
    organization_funding_type: StrList | None = None
    organization_funding_lead_investors: StrList | None = None
    organization_funding_number_of_investors: RangeFilter | None = None


class TeamFilters(ToolInput):
    organization_roles_count: list[DepartmentRangeFilter] | None = None
    organization_open_roles_count: list[DepartmentRangeFilter] | None = None


class OrganizationFilters(
    TeamFilters,
    FundingFilters,
    WebTrafficFilters,
    TechnologyFilters,
    FirmographicFilters,
):
    pass


class IdentityAlternatives(ToolInput):
    """Requires at least one of ``identity_fields`` to be present."""

    identity_fields: ClassVar[tuple[str, str]]

    @model_validator(mode="after")
    def _require_identity(self) -> IdentityAlternatives:
        first, second = self.identity_fields
        if not getattr(self, first) and not getattr(self, second):
            raise ValueError(f"Either {first} or {second} is required")
        return self


# -------- TOOL INPUTS --------


class CheckApiKeyInput(ToolInput):
    pass


class SearchPeopleInput(
    OrganizationFilters,
    PersonFilters,
    ContactInclusionFields,
    PaginationFields,
):
    pass


class LookupPersonInput(ContactInclusionFields):
    company_domain: NonEmptyStr = Field(description="Domain of the company (required)")
    first_name: NonEmptyStr = Field(description="First name of the person (required)")
    last_name: str | None = Field(
        default=None, description="Last name of the person (optional but recommended)"
    )
    title: str | None = Field(default=None, description="Job title or role")
    location: str | None = Field(default=None, description="Location (city, state, or country)")


class LookupPersonByEmailInput(ToolInput):
    email: EmailStr = Field(description="Email address to look up (required)")
    include_phone: Toggle = Field(
        default="exclude", description="Include phone number (+3 credits)"
    )


class LookupPersonByPhoneInput(ToolInput):
    phone: NonEmptyStr = Field(description="Phone number to look up (required)")
    include_email: Toggle = Field(
        default="exclude", description="Include email address (+2 credits)"
    )


class GetPersonProfileInput(ContactInclusionFields):
    linkedin_url: Url = Field(description="LinkedIn profile URL (required)")


class SearchCompaniesInput(OrganizationFilters, PersonFilters, PaginationFields):
    funding: Toggle = Field(
        default="exclude", description="Include funding details (+1 credit per result)"
    )
    extra: Toggle = Field(
        default="exclude",
        description="Include extended company details (+1 credit per result)",
    )
    technology: Toggle = Field(
        default="exclude", description="Include technology details (+2 credits per result)"
    )
    website_traffic: Toggle = Field(
        default="exclude",
        description="Include website traffic details (+1 credit per result)",
    )
    headcount_growth: Toggle = Field(
        default="exclude",
        description="Include headcount growth details (+1 credit per result)",
    )


class GetCompanyProfileInput(IdentityAlternatives):
    identity_fields = ("linkedin_url", "domain")

    linkedin_url: Url | None = Field(default=None, description="LinkedIn company page URL")
    domain: str | None = Field(default=None, description="Company domain name")
    include_funding: Toggle = Field(
        default="exclude",
        description="Include funding and investment information (+2 credits)",
    )
    include_technology: Toggle = Field(
        default="exclude", description="Include technology stack (+1 credit)"
    )
    include_contacts: Toggle = Field(
        default="exclude", description="Include key executive contacts (+3 credits)"
    )


class GetEmployeeCountInput(IdentityAlternatives):
    identity_fields = ("linkedin_url", "domain")

    linkedin_url: Url | None = Field(default=None, description="LinkedIn company page URL")
    domain: str | None = Field(default=None, description="Company domain name")


class SearchEmployeesInput(
    IdentityAlternatives,
    CorePersonFilters,
    ContactInclusionFields,
    PaginationFields,
):
    identity_fields = ("company_domain", "linkedin_url")

    company_domain: str | None = Field(
        default=None, description="Company domain to search within"
    )
    linkedin_url: Url | None = Field(default=None, description="LinkedIn company page URL")


# -------- RESPONSE ENVELOPES --------


class Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    status_code: int | None = Field(default=None, alias="statusCode")
    message: str | None = None


class SingleEnvelope(Envelope):
    data: dict[str, Any]


class ListEnvelope(Envelope):
    data: list[Any]
