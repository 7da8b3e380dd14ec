from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel


# ---------- Plan generation ----------


class PlanTripRequest(BaseModel):
    textPrompt: Optional[str] = None
    userIdentifier: Optional[str] = None


class PlanTripResponse(BaseModel):
    response: str


# ---------- Manual save ----------


class SaveTripRequest(BaseModel):
    # Required fields are checked by TripService so a missing value gets the
    # same 400 message as an empty one.
    guestName: Optional[str] = None
    tripPlan: Optional[str] = None
    aestheticPrompt: Optional[str] = None


class SaveTripResponse(BaseModel):
    success: bool
    message: str
    tripId: Union[int, str]
    savedAt: datetime


# ---------- Listing ----------


class TripPlan(BaseModel):
    text: str
    saved_at: Optional[datetime] = None


class TripSummary(BaseModel):
    id: Union[int, str]
    prompt: str
    plan: TripPlan
    created_at: Optional[datetime] = None


class MyTripsResponse(BaseModel):
    trips: List[TripSummary]


class ErrorResponse(BaseModel):
    error: str
