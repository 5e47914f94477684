from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.platform.schemas import APIResponse


class WaitlistIn(BaseModel):
    # Format checks live in validate_submission so that failures come back as 400s
    # naming the field and reason, the same shape the service raises.
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Contact email")
    message: Optional[str] = Field(None, description="Optional note for the team")
    source: Optional[str] = Field(None, description="Signup channel, defaults to 'landing'")


class WaitlistOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    message: Optional[str] = None
    source: str
    created_at: datetime


class WaitlistJoinOut(WaitlistOut):
    position: int


class WaitlistStatsOut(BaseModel):
    total_signups: int
    signups_last_24h: int


class WaitlistJoinResponse(APIResponse[WaitlistJoinOut]):
    pass


class WaitlistStatsResponse(APIResponse[WaitlistStatsOut]):
    pass
