from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.models.schemas import (
    ErrorResponse,
    MyTripsResponse,
    PlanTripRequest,
    PlanTripResponse,
    SaveTripRequest,
    SaveTripResponse,
)
from app.domain.services.trip_service import TripService
from app.dependencies import get_trip_service

router = APIRouter(tags=["trips"], responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})


@router.post("/plan-trip", response_model=PlanTripResponse)
async def plan_trip(body: PlanTripRequest, svc: TripService = Depends(get_trip_service)):
    text = await svc.plan_trip(body.textPrompt, body.userIdentifier)
    return PlanTripResponse(response=text)


@router.post("/save-trip", response_model=SaveTripResponse)
async def save_trip(body: SaveTripRequest, svc: TripService = Depends(get_trip_service)):
    trip = await svc.save_trip(body.guestName, body.tripPlan, body.aestheticPrompt)
    return SaveTripResponse(
        success=True,
        message=f"Trip saved successfully for {body.guestName}!",
        tripId=trip.id,
        savedAt=trip.created_at,
    )


@router.get("/my-trips", response_model=MyTripsResponse)
async def my_trips(user: Optional[str] = Query(default=None), svc: TripService = Depends(get_trip_service)):
    trips = await svc.list_trips(user)
    return MyTripsResponse(trips=[trip.to_api_model() for trip in trips])
