from sqlalchemy.orm import Session
from typing import List
import logging

from ..models.food_choice import FoodChoice
from ..models.rsvp import RsvpChild
from ..schemas.food_choice import FoodChoiceUpdate
from ..utils.constants import AppConstants
from ..utils.validation import ValidationHelpers
from .errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class FoodChoiceService:
    def __init__(self, db: Session):
        self.db = db

    def list_active(self) -> List[FoodChoice]:
        return (
            self.db.query(FoodChoice)
            .filter(FoodChoice.active == True)
            .order_by(FoodChoice.id.asc())
            .all()
        )

    def list_all(self) -> List[FoodChoice]:
        return self.db.query(FoodChoice).order_by(FoodChoice.id.asc()).all()

    def get_food_choice(self, food_choice_id: int) -> FoodChoice:
        food_choice = self.db.get(FoodChoice, food_choice_id)
        if not food_choice:
            raise NotFoundError(f"Food choice {food_choice_id} not found")
        return food_choice

    def create(self, label: str) -> FoodChoice:
        label = ValidationHelpers.clean_text(label)
        if not label:
            raise ValidationError("Label required")
        self._check_label_length(label)

        food_choice = FoodChoice(label=label, active=True)
        self.db.add(food_choice)
        self.db.commit()
        self.db.refresh(food_choice)
        return food_choice

    def update(self, food_choice_id: int, updates: FoodChoiceUpdate) -> FoodChoice:
        food_choice = self.get_food_choice(food_choice_id)

        if updates.label is not None:
            label = ValidationHelpers.clean_text(updates.label)
            if not label:
                raise ValidationError("Label cannot be empty")
            self._check_label_length(label)
            food_choice.label = label

        if updates.active is not None:
            food_choice.active = updates.active

        self.db.commit()
        self.db.refresh(food_choice)
        return food_choice

    def delete(self, food_choice_id: int):
        """Hard delete, refused while any RSVP child still references the choice"""
        food_choice = self.get_food_choice(food_choice_id)

        references = (
            self.db.query(RsvpChild)
            .filter(RsvpChild.food_choice_id == food_choice_id)
            .count()
        )
        if references:
            raise ConflictError(
                f"Food choice '{food_choice.label}' is used by {references} "
                f"RSVP(s); deactivate it instead"
            )

        self.db.delete(food_choice)
        self.db.commit()
        logger.info(f"Deleted food choice {food_choice_id}")

    @staticmethod
    def _check_label_length(label: str):
        if not ValidationHelpers.validate_length(label, AppConstants.MAX_LABEL_LENGTH):
            raise ValidationError(
                f"Label must be at most {AppConstants.MAX_LABEL_LENGTH} characters"
            )
