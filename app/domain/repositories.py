from abc import ABC, abstractmethod
import asyncio
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from .models import TripRecord, TripSource


class TripRepository(ABC):
    @abstractmethod
    async def add(self, trip: TripRecord) -> TripRecord:
        """Insert a record and return it with the store-assigned id and created_at."""
        raise NotImplementedError

    @abstractmethod
    async def list_for_user(self, user_identifier: str, source: TripSource, limit: int) -> List[TripRecord]:
        """Most recent records first."""
        raise NotImplementedError


class InMemoryTripRepository(TripRepository):
    def __init__(self):
        self._rows: List[TripRecord] = []

    async def add(self, trip: TripRecord) -> TripRecord:
        stored = replace(
            trip,
            id=trip.id if trip.id is not None else str(uuid4()),
            created_at=trip.created_at or datetime.now(timezone.utc),
        )
        self._rows.append(stored)
        return replace(stored)

    async def list_for_user(self, user_identifier: str, source: TripSource, limit: int) -> List[TripRecord]:
        matches = [
            trip
            for trip in reversed(self._rows)
            if trip.user_identifier == user_identifier and trip.source == source
        ]
        matches.sort(key=lambda trip: trip.created_at, reverse=True)
        return matches[:limit]


class SupabaseTripRepository(TripRepository):
    """
    Supabase-backed repository. Each trip is one row; the plan body lives in a JSONB
    ``plan`` column as ``{"text": ..., "saved_at": ...}``.
    """

    def __init__(self, client, table_name: str = "trips"):
        if client is None:
            raise ValueError("Supabase client is required for SupabaseTripRepository")
        self.client = client
        self.table_name = table_name

    async def add(self, trip: TripRecord) -> TripRecord:
        payload: Dict[str, Any] = {
            "user_identifier": trip.user_identifier,
            "prompt": trip.prompt,
            "plan": trip.plan_payload(),
            "source": trip.source,
        }
        if trip.created_at is not None:
            payload["created_at"] = trip.created_at.isoformat()

        response = await asyncio.to_thread(
            lambda: self.client.table(self.table_name).insert(payload).execute()
        )
        rows = getattr(response, "data", None) or []
        if not rows or rows[0].get("id") is None:
            raise RuntimeError(f"Insert into {self.table_name} returned no row")
        stored = rows[0]
        created_at = _parse_dt(stored.get("created_at")) or trip.created_at
        if created_at is None:
            raise RuntimeError(f"Insert into {self.table_name} returned no created_at")
        return replace(trip, id=stored["id"], created_at=created_at)

    async def list_for_user(self, user_identifier: str, source: TripSource, limit: int) -> List[TripRecord]:
        response = await asyncio.to_thread(
            lambda: self.client.table(self.table_name)
            .select("id, user_identifier, prompt, plan, created_at, source")
            .eq("user_identifier", user_identifier)
            .eq("source", source)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        rows = getattr(response, "data", None) or []
        return [self._row_to_entity(row) for row in rows]

    def _row_to_entity(self, row: Dict) -> TripRecord:
        plan = row.get("plan") or {}
        if isinstance(plan, str):
            plan = {"text": plan}
        return TripRecord(
            id=row.get("id"),
            user_identifier=row.get("user_identifier", ""),
            prompt=row.get("prompt") or "",
            plan_text=plan.get("text") or "",
            source=row.get("source") or "manual",
            created_at=_parse_dt(row.get("created_at")),
            saved_at=_parse_dt(plan.get("saved_at")),
        )


def _parse_dt(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if value.endswith("Z"):
        value = value.replace("Z", "+00:00")
    return datetime.fromisoformat(value)
