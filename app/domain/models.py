from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Literal, Optional, Union

TripSource = Literal["auto", "manual"]

TripId = Union[int, str]


@dataclass
class TripRecord:
    user_identifier: str
    prompt: str
    plan_text: str
    source: TripSource
    id: Optional[TripId] = None
    created_at: Optional[datetime] = None
    saved_at: Optional[datetime] = None

    def plan_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"text": self.plan_text}
        if self.saved_at is not None:
            payload["saved_at"] = self.saved_at.isoformat()
        return payload

    def to_api_model(self):
        from app.api.models.schemas import TripPlan, TripSummary

        return TripSummary(
            id=self.id,
            prompt=self.prompt,
            plan=TripPlan(text=self.plan_text, saved_at=self.saved_at),
            created_at=self.created_at,
        )
