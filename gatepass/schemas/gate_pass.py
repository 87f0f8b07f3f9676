# gatepass/schemas/gate_pass.py
"""
Gate pass records and the request bodies that act on them.
Python attributes are snake_case; the wire and the stored document use camelCase.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from gatepass.utils.time_utils import ensure_utc


class PassStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Location(BaseModel):
    latitude: float
    longitude: float
    timestamp: Optional[datetime] = None
    is_late: bool = True

    @field_validator("timestamp")
    @classmethod
    def _as_utc(cls, value):
        return ensure_utc(value)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class GatePass(BaseModel):
    id: str
    student_id: str
    student_name: str
    reason: str
    destination: str
    expected_return: datetime
    status: str = PassStatus.PENDING.value   # not restricted: decisions are trusted
    requested_at: datetime
    moderator_remarks: str = ""
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    exit_time: Optional[datetime] = None
    entry_time: Optional[datetime] = None
    location: Optional[Location] = None

    @field_validator("expected_return", "requested_at", "approved_at", "exit_time", "entry_time")
    @classmethod
    def _as_utc(cls, value):
        return ensure_utc(value)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def __repr__(self):
        return f"<GatePass {self.id} student={self.student_id} status={self.status}>"


class PassCreate(BaseModel):
    student_id: str
    student_name: str
    reason: str
    destination: str
    expected_return: datetime

    @field_validator("expected_return")
    @classmethod
    def _as_utc(cls, value):
        return ensure_utc(value)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PassDecision(BaseModel):
    status: str        # trusted as given, like the lifecycle engine
    remarks: Optional[str] = None
    moderator_name: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class LocationReport(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    timestamp: Optional[datetime] = None   # defaults to server time when omitted

    @field_validator("timestamp")
    @classmethod
    def _as_utc(cls, value):
        return ensure_utc(value)
