from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ..database import get_db
from ..schemas.common import OkResponse
from ..schemas.food_choice import (
    FoodChoiceCreate,
    FoodChoiceOption,
    FoodChoiceResponse,
    FoodChoiceUpdate,
)
from ..services.food_choice_service import FoodChoiceService
from ..utils.router_helpers import handle_service_errors

router = APIRouter(tags=["food-choices"])
admin_router = APIRouter(tags=["admin"])


@router.get("/food-choices", response_model=List[FoodChoiceOption])
@handle_service_errors
async def list_food_choices(db: Session = Depends(get_db)):
    """Active food choices offered on the RSVP form"""
    return FoodChoiceService(db).list_active()


@admin_router.get("/food-choices", response_model=List[FoodChoiceResponse])
@handle_service_errors
async def list_all_food_choices(db: Session = Depends(get_db)):
    return FoodChoiceService(db).list_all()


@admin_router.post("/food-choices", response_model=FoodChoiceResponse)
@handle_service_errors
async def create_food_choice(
    food_choice_data: FoodChoiceCreate,
    db: Session = Depends(get_db),
):
    return FoodChoiceService(db).create(food_choice_data.label)


@admin_router.put("/food-choices/{food_choice_id}", response_model=FoodChoiceResponse)
@handle_service_errors
async def update_food_choice(
    food_choice_id: int,
    food_choice_data: FoodChoiceUpdate,
    db: Session = Depends(get_db),
):
    return FoodChoiceService(db).update(food_choice_id, food_choice_data)


@admin_router.delete("/food-choices/{food_choice_id}", response_model=OkResponse)
@handle_service_errors
async def delete_food_choice(
    food_choice_id: int,
    db: Session = Depends(get_db),
):
    """Delete an unused food choice; used ones must be deactivated instead"""
    FoodChoiceService(db).delete(food_choice_id)
    return OkResponse()
