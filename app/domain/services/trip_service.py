from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import List, Optional

from openai import AsyncOpenAI

from app.ai.prompts import BOOKING_LINKS
from app.ai.trip_generator import generate_trip_plan
from app.core.errors import StorageError, ValidationError
from app.domain.models import TripRecord
from app.domain.repositories import TripRepository

logger = logging.getLogger(__name__)

GUEST_IDENTIFIER = "guest"
GENERATED_PROMPT_PLACEHOLDER = "text-only"
SAVED_PROMPT_PLACEHOLDER = "saved-trip"
MAX_LISTED_TRIPS = 10


class TripService:
    def __init__(self, repo: TripRepository, client: Optional[AsyncOpenAI] = None):
        self.repo = repo
        self.client = client

    async def plan_trip(self, text_prompt: Optional[str], user_identifier: Optional[str]) -> str:
        plan = await generate_trip_plan(text_prompt, client=self.client)
        final_text = plan + BOOKING_LINKS

        trip = TripRecord(
            user_identifier=user_identifier or GUEST_IDENTIFIER,
            prompt=text_prompt or GENERATED_PROMPT_PLACEHOLDER,
            plan_text=final_text,
            source="auto",
        )
        try:
            await self.repo.add(trip)
        except Exception as exc:
            # Persistence is best effort here; the caller still gets the plan.
            logger.error("Failed to store generated trip for %s: %s", trip.user_identifier, exc)
        return final_text

    async def save_trip(
        self, guest_name: Optional[str], trip_plan: Optional[str], aesthetic_prompt: Optional[str] = None
    ) -> TripRecord:
        if not guest_name or not trip_plan:
            raise ValidationError("Missing required fields: guestName and tripPlan")

        now = datetime.now(timezone.utc)
        trip = TripRecord(
            user_identifier=guest_name,
            prompt=aesthetic_prompt or SAVED_PROMPT_PLACEHOLDER,
            plan_text=trip_plan,
            source="manual",
            created_at=now,
            saved_at=now,
        )
        try:
            return await self.repo.add(trip)
        except Exception as exc:
            logger.exception("Failed to save trip for %s: %s", guest_name, exc)
            raise StorageError("Failed to save trip") from exc

    async def list_trips(self, user: Optional[str]) -> List[TripRecord]:
        if not user:
            raise ValidationError("Missing user query param")
        try:
            return await self.repo.list_for_user(user, "manual", MAX_LISTED_TRIPS)
        except Exception as exc:
            logger.exception("Failed to fetch trips for %s: %s", user, exc)
            raise StorageError("Failed to fetch trips") from exc
