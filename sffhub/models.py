# sffhub/models.py
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ──────────────────────────────────────────────────────────────────────────────
# Enums (values are what the intake form and the tables store)
# ──────────────────────────────────────────────────────────────────────────────
class NeedType(str, Enum):
    REPURPOSE = "Repurpose"
    SOCIAL_EDIT = "Social Edit"
    SMART_CUT = "Smart Cut"
    CAPTIONS = "Captions"
    OTHER = "Other"


class Platform(str, Enum):
    TIKTOK = "TikTok"
    IG = "IG"
    SHORTS = "Shorts"


class Turnaround(str, Enum):
    STANDARD = "24-48h"
    RUSH_12H = "Rush 12h"
    CUSTOM = "Custom"


class BudgetRange(str, Enum):
    UNDER_200 = "<200"
    FROM_200_TO_500 = "200-500"
    FROM_500_TO_1K = "500-1k"
    OVER_1K = "1k+"


class RequestStatus(str, Enum):
    NEW = "NEW"
    IN_REVIEW = "IN_REVIEW"
    QUOTED = "QUOTED"
    WON = "WON"
    LOST = "LOST"


class JobStatus(str, Enum):
    INTAKE_PENDING = "INTAKE_PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    QA = "QA"
    DELIVERED = "DELIVERED"
    REVISIONS = "REVISIONS"
    CLOSED = "CLOSED"


class ComplexityTier(str, Enum):
    BASIC = "BASIC"
    PRO = "PRO"
    ELITE = "ELITE"


class SpeedTier(str, Enum):
    STANDARD = "STANDARD"
    RUSH = "RUSH"


class PayoutStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


CHECKLIST_FLAGS = (
    "payment_confirmed",
    "files_received",
    "scope_locked",
    "edit_in_progress",
    "qa_pass",
    "delivered",
    "revision_requested",
    "closed",
)


# ──────────────────────────────────────────────────────────────────────────────
# Rows (emails as plain strings to avoid extra dependency)
# ──────────────────────────────────────────────────────────────────────────────
class BuyerRequest(BaseModel):
    id: UUID
    created_at: Optional[datetime] = None
    name: str
    email: str
    company: Optional[str] = None
    need_type: NeedType
    platforms: List[Platform]
    volume_per_week: int
    turnaround: Turnaround
    budget_range: BudgetRange
    footage_link: Optional[str] = None
    examples_link: Optional[str] = None
    notes: Optional[str] = None
    status: RequestStatus
    complexity_suggested: Optional[ComplexityTier] = None
    speed_tier: Optional[SpeedTier] = None


class Job(BaseModel):
    id: UUID
    created_at: Optional[datetime] = None
    request_id: Optional[UUID] = None
    status: JobStatus
    buyer_name: str
    buyer_email: str
    service: str
    package: Optional[str] = None
    rush: bool = False
    due_at: Optional[datetime] = None
    assets_link: Optional[str] = None
    footage_link: Optional[str] = None
    delivery_link: Optional[str] = None
    qa_notes: Optional[str] = None
    buyer_price: Optional[float] = None
    editor_payout: Optional[float] = None
    payout_status: Optional[PayoutStatus] = None


class JobChecklist(BaseModel):
    id: UUID
    job_id: UUID
    payment_confirmed: bool = False
    files_received: bool = False
    scope_locked: bool = False
    edit_in_progress: bool = False
    qa_pass: bool = False
    delivered: bool = False
    revision_requested: bool = False
    closed: bool = False


class Template(BaseModel):
    id: UUID
    created_at: Optional[datetime] = None
    name: str
    subject: Optional[str] = None
    body: str


# ──────────────────────────────────────────────────────────────────────────────
# Inputs
# ──────────────────────────────────────────────────────────────────────────────
class RequestIn(BaseModel):
    """Public intake form payload."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    company: Optional[str] = None
    need_type: NeedType
    platforms: List[Platform] = Field(..., min_length=1)
    volume_per_week: int = Field(..., gt=0)
    turnaround: Turnaround
    budget_range: BudgetRange
    footage_link: Optional[str] = None
    examples_link: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("company", "footage_link", "examples_link", "notes", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        # untouched form inputs arrive as ""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("platforms", mode="before")
    @classmethod
    def _single_platform(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("platforms")
    @classmethod
    def _dedupe_platforms(cls, v: List[Platform]) -> List[Platform]:
        return list(dict.fromkeys(v))

    @field_validator("email")
    @classmethod
    def _looks_like_email(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("not a valid email address")
        return v


class RequestStatusIn(BaseModel):
    status: RequestStatus


class RequestTiersIn(BaseModel):
    complexity_suggested: ComplexityTier
    speed_tier: SpeedTier


class JobStatusIn(BaseModel):
    status: JobStatus


class JobUpdate(BaseModel):
    """Partial job edit; only the keys actually sent are written."""

    model_config = ConfigDict(extra="forbid")

    buyer_name: Optional[str] = None
    buyer_email: Optional[str] = None
    service: Optional[str] = None
    package: Optional[str] = None
    rush: Optional[bool] = None
    due_at: Optional[datetime] = None
    assets_link: Optional[str] = None
    footage_link: Optional[str] = None
    delivery_link: Optional[str] = None
    qa_notes: Optional[str] = None
    buyer_price: Optional[float] = None
    editor_payout: Optional[float] = None
    payout_status: Optional[PayoutStatus] = None

    @field_validator("buyer_name", "buyer_email", "service", "rush")
    @classmethod
    def _required_on_job(cls, v: Any) -> Any:
        # may be omitted, never cleared: the jobs row requires them
        if v is None:
            raise ValueError("cannot be null")
        return v


class ChecklistUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    payment_confirmed: Optional[bool] = None
    files_received: Optional[bool] = None
    scope_locked: Optional[bool] = None
    edit_in_progress: Optional[bool] = None
    qa_pass: Optional[bool] = None
    delivered: Optional[bool] = None
    revision_requested: Optional[bool] = None
    closed: Optional[bool] = None


class TemplateIn(BaseModel):
    name: str = Field(..., min_length=1)
    subject: Optional[str] = None
    body: str = Field(..., min_length=1)


class RenderIn(BaseModel):
    values: Dict[str, Any] = Field(default_factory=dict)


class LoginIn(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


# ──────────────────────────────────────────────────────────────────────────────
# Outputs
# ──────────────────────────────────────────────────────────────────────────────
class ConversionResult(BaseModel):
    job_id: UUID
    request_marked_won: bool = True


class RenderedMessage(BaseModel):
    subject: Optional[str] = None
    body: str


class AdminUser(BaseModel):
    id: str
    email: Optional[str] = None
