from pydantic import BaseModel, Field
from typing import List


class FoodTotal(BaseModel):
    id: int
    label: str
    count: int


class MetricsResponse(BaseModel):
    """
    invited and rsvps count different tables. Invites are not linked to
    RSVPs, so the two numbers are not a response rate.
    """

    invited: int
    rsvps: int
    food_totals: List[FoodTotal] = Field(..., alias="foodTotals")

    class Config:
        populate_by_name = True
