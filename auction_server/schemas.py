from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# --- Participant record ---
# The experiment frontend posts camelCase keys; Python code uses snake_case.
class BidHistory(BaseModel):
    model_config = ConfigDict(extra="ignore")

    simulation: List[Any] = Field(default_factory=list)
    formal: List[Any] = Field(default_factory=list)

    @field_validator("simulation", "formal", mode="before")
    @classmethod
    def none_as_empty_list(cls, value):
        return [] if value is None else value


class ParticipantBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    participant_id: Optional[str] = None
    group: Optional[str] = None
    unique_code: Optional[str] = None
    page_times: Optional[Any] = None
    bid_history: BidHistory = Field(default_factory=BidHistory)
    survey_responses: Optional[Any] = None
    risk_responses: List[Any] = Field(default_factory=list)
    immediate_purchase: Optional[bool] = None
    final_winner: Optional[bool] = None
    auction_profit: Optional[float] = None
    lottery_bonus: Optional[float] = None
    alipay: Optional[str] = None

    @field_validator("participant_id", "group", "unique_code", "alipay", mode="before")
    @classmethod
    def bool_as_text(cls, value):
        if isinstance(value, bool):
            return "true" if value else "false"
        return value

    @field_validator("bid_history", mode="before")
    @classmethod
    def none_as_empty_history(cls, value):
        return {} if value is None else value

    @field_validator("risk_responses", mode="before")
    @classmethod
    def none_as_empty_list(cls, value):
        return [] if value is None else value


class ParticipantCreate(ParticipantBase):
    """A partial participant record as submitted by the experiment frontend."""

    created_at: Optional[datetime] = None

    @field_validator("created_at")
    @classmethod
    def to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # The column keeps no offset, so aware values are stored as UTC.
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc)
        return value


class ParticipantRecord(ParticipantBase):
    """A stored participant record, as returned by the listing endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored in UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"
