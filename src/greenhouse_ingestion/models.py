from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# --- Contact channel types ---


class PhoneNumberType(str, Enum):
    HOME = "home"
    WORK = "work"
    MOBILE = "mobile"
    SKYPE = "skype"
    OTHER = "other"


class EmailType(str, Enum):
    PERSONAL = "personal"
    WORK = "work"
    OTHER = "other"


class WebsiteType(str, Enum):
    PERSONAL = "personal"
    COMPANY = "company"
    PORTFOLIO = "portfolio"
    BLOG = "blog"
    OTHER = "other"


class AddressType(str, Enum):
    HOME = "home"
    WORK = "work"
    OTHER = "other"


# --- Input Models (request bodies) ---


class PhoneNumber(BaseModel):
    phone_number: str
    type: PhoneNumberType = PhoneNumberType.OTHER

    model_config = ConfigDict(extra="forbid")


class Email(BaseModel):
    email: str
    type: EmailType = EmailType.OTHER

    model_config = ConfigDict(extra="forbid")


class SocialMedia(BaseModel):
    url: str

    model_config = ConfigDict(extra="forbid")


class Website(BaseModel):
    url: str
    type: WebsiteType = WebsiteType.OTHER

    model_config = ConfigDict(extra="forbid")


class Address(BaseModel):
    address: str
    type: AddressType = AddressType.OTHER

    model_config = ConfigDict(extra="forbid")


class PostCandidate(BaseModel):
    """
    A candidate (or prospect) to create.
    Unset optional fields are left out of the request body.
    """

    prospect: bool = False
    first_name: str
    last_name: str
    company: Optional[str] = None
    title: Optional[str] = None
    resume: Optional[str] = None  # URL
    phone_numbers: List[PhoneNumber] = Field(default_factory=list)
    emails: List[Email] = Field(default_factory=list)
    social_media: List[SocialMedia] = Field(default_factory=list)
    websites: List[Website] = Field(default_factory=list)
    addresses: List[Address] = Field(default_factory=list)
    job_id: Optional[int] = None
    external_id: Optional[str] = None
    notes: Optional[str] = None
    prospect_pool_id: Optional[int] = None
    prospect_pool_stage_id: Optional[int] = None
    prospect_owner_email: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class PostApplication(BaseModel):
    """Adds an existing candidate to a job."""

    candidate_id: int
    job_id: int
    external_id: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


# --- Response Models ---


class Application(BaseModel):
    id: int
    job: Optional[str] = None
    status: Optional[str] = None
    stage: Optional[str] = None
    profile_url: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class Candidate(BaseModel):
    id: int
    name: str
    external_id: Optional[str] = None
    applications: List[Application] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class PostCandidateResponse(BaseModel):
    id: int
    application_id: Optional[int] = None
    external_id: Optional[str] = None
    profile_url: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class PostApplicationResponse(BaseModel):
    id: int
    candidate_id: Optional[int] = None
    job_id: Optional[int] = None
    external_id: Optional[str] = None
    profile_url: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class Job(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(extra="ignore")


class ProspectPoolStage(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(extra="ignore")


class ProspectPool(BaseModel):
    id: int
    name: str
    prospect_pool_stages: List[ProspectPoolStage] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class CurrentUser(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str

    model_config = ConfigDict(extra="ignore")

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)
