from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Any, Dict, List
from dataclasses import dataclass

from ..models.food_choice import FoodChoice
from ..models.invite import Invite
from ..models.rsvp import Rsvp, RsvpChild


@dataclass(frozen=True)
class FoodTotal:
    id: int
    label: str
    count: int


@dataclass(frozen=True)
class Metrics:
    invited: int
    rsvps: int
    food_totals: List[FoodTotal]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "invited": self.invited,
            "rsvps": self.rsvps,
            "foodTotals": [
                {"id": t.id, "label": t.label, "count": t.count}
                for t in self.food_totals
            ],
        }


class MetricsService:
    def __init__(self, db: Session):
        self.db = db

    def compute_metrics(self) -> Metrics:
        """Invite and RSVP counts plus how many children picked each food choice"""

        invited = self.db.query(func.count(Invite.id)).scalar() or 0
        rsvps = self.db.query(func.count(Rsvp.id)).scalar() or 0

        # Outer join keeps choices nobody picked, with a count of 0
        rows = (
            self.db.query(
                FoodChoice.id,
                FoodChoice.label,
                func.count(RsvpChild.id),
            )
            .outerjoin(RsvpChild, RsvpChild.food_choice_id == FoodChoice.id)
            .group_by(FoodChoice.id, FoodChoice.label)
            .order_by(FoodChoice.id.asc())
            .all()
        )

        return Metrics(
            invited=invited,
            rsvps=rsvps,
            food_totals=[
                FoodTotal(id=food_id, label=label, count=total)
                for food_id, label, total in rows
            ],
        )
