from typing import Optional

from fastapi import Depends
from openai import AsyncOpenAI

from app.ai.openai_client import get_client
from app.core.config import settings
from app.domain.repositories import (
    InMemoryTripRepository,
    SupabaseTripRepository,
    TripRepository,
)
from app.domain.services.trip_service import TripService
from app.external.supabase_client import get_supabase_client

_supabase_client = get_supabase_client()
if _supabase_client:
    _repo: TripRepository = SupabaseTripRepository(_supabase_client, settings.trips_table)
else:
    _repo = InMemoryTripRepository()


def get_trip_repo() -> TripRepository:
    return _repo


def get_completion_client() -> Optional[AsyncOpenAI]:
    return get_client()


def get_trip_service(
    repo: TripRepository = Depends(get_trip_repo),
    client: Optional[AsyncOpenAI] = Depends(get_completion_client),
) -> TripService:
    return TripService(repo=repo, client=client)


__all__ = [
    "get_trip_repo",
    "get_completion_client",
    "get_trip_service",
    "settings",
]
