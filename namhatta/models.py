"""
Record types exchanged with the Namhatta Management System API.

These are passive shapes parsed from camelCase JSON responses. Fields the
API may omit are optional, unknown fields are ignored, and none of the
models carry behaviour beyond parsing.

Example:
    devotee = Devotee.model_validate(response_json)
    print(devotee.legal_name, devotee.present_address.district)
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiRecord(BaseModel):
    """Base for API records: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class MaritalStatus(str, Enum):
    MARRIED = "MARRIED"
    UNMARRIED = "UNMARRIED"
    WIDOWED = "WIDOWED"


class LeadershipRole(str, Enum):
    """Devotee leadership roles, highest first."""

    MALA_SENAPOTI = "MALA_SENAPOTI"
    MAHA_CHAKRA_SENAPOTI = "MAHA_CHAKRA_SENAPOTI"
    CHAKRA_SENAPOTI = "CHAKRA_SENAPOTI"
    UPA_CHAKRA_SENAPOTI = "UPA_CHAKRA_SENAPOTI"


class NamhattaStatus(str, Enum):
    PENDING_APPROVAL = "PENDING_APPROVAL"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Address(ApiRecord):
    country: str | None = None
    state: str | None = None
    district: str | None = None
    sub_district: str | None = None
    village: str | None = None
    postal_code: str | None = None
    landmark: str | None = None


class DevotionalCourse(ApiRecord):
    name: str
    date: str
    institute: str


class Devotee(ApiRecord):
    id: int
    legal_name: str
    name: str | None = None  # initiated/spiritual name
    dob: str | None = None
    email: str | None = None
    phone: str | None = None
    father_name: str | None = None
    mother_name: str | None = None
    husband_name: str | None = None
    gender: Gender | None = None
    blood_group: str | None = None
    marital_status: MaritalStatus | None = None
    present_address: Address | None = None
    permanent_address: Address | None = None
    devotional_status_id: int | None = None
    devotional_status_name: str | None = None
    namhatta_id: int | None = None
    harinam_initiation_gurudev_id: int | None = None
    pancharatrik_initiation_gurudev_id: int | None = None
    harinam_initiation_gurudev: str | None = None
    pancharatrik_initiation_gurudev: str | None = None
    initiated_name: str | None = None
    harinam_date: str | None = None
    pancharatrik_date: str | None = None
    education: str | None = None
    occupation: str | None = None
    devotional_courses: list[DevotionalCourse] = Field(default_factory=list)
    additional_comments: str | None = None
    shraddhakutir_id: int | None = None
    leadership_role: LeadershipRole | None = None
    reporting_to_devotee_id: int | None = None
    has_system_access: bool | None = None
    appointed_date: str | None = None
    appointed_by: int | None = None
    created_at: datetime
    updated_at: datetime


class Namhatta(ApiRecord):
    id: int
    code: str
    name: str
    meeting_day: str | None = None
    meeting_time: str | None = None
    address: Address | None = None
    # Leadership positions, stored as devotee names
    mala_senapoti: str | None = None
    maha_chakra_senapoti: str | None = None
    chakra_senapoti: str | None = None
    upa_chakra_senapoti: str | None = None
    secretary: str | None = None
    president: str | None = None
    accountant: str | None = None
    district_supervisor_id: int
    district_supervisor_name: str | None = None
    status: NamhattaStatus
    registration_no: str | None = None
    registration_date: str | None = None
    devotee_count: int | None = None
    created_at: datetime
    updated_at: datetime


class DevotionalStatus(ApiRecord):
    id: int
    name: str
    created_at: datetime


class Gurudev(ApiRecord):
    id: int
    name: str
    title: str | None = None
    created_at: datetime


class Shraddhakutir(ApiRecord):
    id: int
    name: str
    code: str
    district_code: str
    created_at: datetime


class NamhattaUpdateCard(ApiRecord):
    namhatta_id: int
    namhatta_name: str
    program_type: str
    date: str
    attendance: int


class DashboardSummary(ApiRecord):
    total_devotees: int
    total_namhattas: int
    recent_updates: list[NamhattaUpdateCard] = Field(default_factory=list)


class LeaderLocation(ApiRecord):
    country: str | None = None
    state: str | None = None
    district: str | None = None


class Leader(ApiRecord):
    id: int
    name: str
    role: str
    reporting_to: int | None = None
    location: LeaderLocation | None = None


class DevoteeLeader(ApiRecord):
    id: int
    devotee_id: int
    name: str  # legal or initiated name
    legal_name: str
    leadership_role: LeadershipRole
    reporting_to_devotee_id: int | None = None
    reporting_to_devotee_name: str | None = None
    appointed_date: str | None = None
    appointed_by: int | None = None
    namhatta_id: int | None = None
    namhatta_name: str | None = None
    has_system_access: bool | None = None


class HierarchyResponse(ApiRecord):
    founder: list[Leader] = Field(default_factory=list)
    gbc: list[Leader] = Field(default_factory=list)
    regional_directors: list[Leader] = Field(default_factory=list)
    co_regional_directors: list[Leader] = Field(default_factory=list)
    district_supervisors: list[Leader] = Field(default_factory=list)
    mala_senapotis: list[DevoteeLeader] = Field(default_factory=list)
    maha_chakra_senapotis: list[DevoteeLeader] = Field(default_factory=list)
    chakra_senapotis: list[DevoteeLeader] = Field(default_factory=list)
    upa_chakra_senapotis: list[DevoteeLeader] = Field(default_factory=list)


class PaginatedResponse(ApiRecord, Generic[T]):
    """One page of results; parse as PaginatedResponse[Devotee]."""

    data: list[T] = Field(default_factory=list)
    total: int = 0
