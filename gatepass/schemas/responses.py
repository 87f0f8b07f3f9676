# gatepass/schemas/responses.py
"""Response envelopes. Every body carries a boolean success flag."""

from typing import Optional

from pydantic import BaseModel, Field

from gatepass.schemas.gate_pass import GatePass
from gatepass.schemas.user import UserProfile


class LoginResponse(BaseModel):
    success: bool = True
    user: UserProfile


class PassResponse(BaseModel):
    success: bool = True
    pass_: GatePass = Field(..., alias="pass")

    class Config:
        populate_by_name = True


class PassListResponse(BaseModel):
    success: bool = True
    passes: list[GatePass]


class LocationResponse(BaseModel):
    success: bool
    message: str
    pass_: Optional[GatePass] = Field(None, alias="pass")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    success: bool = False
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    storage: str
