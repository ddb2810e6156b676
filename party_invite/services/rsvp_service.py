from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple
from datetime import datetime
from dataclasses import dataclass
import logging

from ..models.rsvp import Rsvp, RsvpChild
from ..models.food_choice import FoodChoice
from ..utils.constants import AppConstants, Messages
from ..utils.validation import ValidationHelpers
from .errors import IntegrityViolationError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChildInput:
    """One child row as received from the caller, before validation"""

    child_name: Any = None
    food_choice_id: Any = None
    has_dietary_requirements: bool = False
    dietary_requirements: Optional[str] = None


@dataclass(frozen=True)
class RsvpChildRecord:
    id: int
    child_name: str
    food_choice_id: int
    has_dietary_requirements: bool
    dietary_requirements: Optional[str]
    food_choice_label: Optional[str] = None


@dataclass(frozen=True)
class RsvpRecord:
    """An RSVP together with every child persisted with it"""

    id: int
    invite_name_entered: str
    phone: Optional[str]
    created_at: Optional[datetime]
    children: Tuple[RsvpChildRecord, ...]


@dataclass(frozen=True)
class _ValidChild:
    child_name: str
    food_choice_id: int
    has_dietary_requirements: bool
    dietary_requirements: Optional[str]


class RsvpService:
    def __init__(self, db: Session, phone_required: bool = False):
        self.db = db
        self.phone_required = phone_required

    def submit_rsvp(
        self,
        invite_name_entered: Optional[str],
        phone: Optional[str],
        children: Sequence[ChildInput],
    ) -> RsvpRecord:
        """Validate and store one RSVP with all of its children atomically"""

        name = ValidationHelpers.clean_text(invite_name_entered)
        if not name:
            raise ValidationError("Invite name is required")
        if not ValidationHelpers.validate_length(name, AppConstants.MAX_NAME_LENGTH):
            raise ValidationError(
                f"Invite name must be at most {AppConstants.MAX_NAME_LENGTH} characters"
            )

        phone = ValidationHelpers.clean_text(phone)
        if self.phone_required and not phone:
            raise ValidationError("Phone number is required")
        if not ValidationHelpers.validate_length(phone, AppConstants.MAX_PHONE_LENGTH):
            raise ValidationError(
                f"Phone number must be at most {AppConstants.MAX_PHONE_LENGTH} characters"
            )

        valid_children = self._validate_children(children)
        self._check_food_choices_exist({c.food_choice_id for c in valid_children})

        try:
            rsvp = Rsvp(invite_name_entered=name, phone=phone)
            self.db.add(rsvp)
            self.db.flush()

            for child in valid_children:
                self.db.add(
                    RsvpChild(
                        rsvp_id=rsvp.id,
                        child_name=child.child_name,
                        food_choice_id=child.food_choice_id,
                        has_dietary_requirements=child.has_dietary_requirements,
                        dietary_requirements=child.dietary_requirements,
                    )
                )

            self.db.flush()
            self.db.commit()

        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"RSVP rejected by store constraints: {e.orig}")
            raise IntegrityViolationError("One or more food choices do not exist")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save RSVP: {e}", exc_info=True)
            raise PersistenceError(Messages.RSVP_SAVE_FAILED)
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(rsvp)
        record = self._to_record(rsvp, list(rsvp.children))
        logger.info(
            f"RSVP {record.id} saved for '{record.invite_name_entered}' "
            f"with {len(record.children)} child(ren)"
        )
        return record

    def _validate_children(self, children: Sequence[ChildInput]) -> List[_ValidChild]:
        if not children:
            raise ValidationError("At least one child is required")

        valid = []
        for position, child in enumerate(children, start=1):
            child_name = ValidationHelpers.clean_text(child.child_name)
            if not child_name:
                raise ValidationError(f"Child {position}: name is required")
            if not ValidationHelpers.validate_length(
                child_name, AppConstants.MAX_NAME_LENGTH
            ):
                raise ValidationError(
                    f"Child {position}: name must be at most "
                    f"{AppConstants.MAX_NAME_LENGTH} characters"
                )

            food_choice_id = ValidationHelpers.parse_positive_int(child.food_choice_id)
            if food_choice_id is None:
                raise ValidationError(
                    f"Child {position}: a valid food choice is required"
                )

            has_dietary = bool(child.has_dietary_requirements)
            note = ValidationHelpers.clean_text(child.dietary_requirements)
            if has_dietary and not note:
                raise ValidationError(
                    f"Child {position}: please describe the dietary requirements"
                )

            valid.append(
                _ValidChild(
                    child_name=child_name,
                    food_choice_id=food_choice_id,
                    has_dietary_requirements=has_dietary,
                    dietary_requirements=note if has_dietary else None,
                )
            )

        return valid

    def _check_food_choices_exist(self, food_choice_ids: Iterable[int]):
        wanted = set(food_choice_ids)
        try:
            found = {
                row.id
                for row in self.db.query(FoodChoice.id)
                .filter(FoodChoice.id.in_(wanted))
                .all()
            }
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to look up food choices: {e}", exc_info=True)
            raise PersistenceError(Messages.RSVP_SAVE_FAILED)

        missing = sorted(wanted - found)
        if missing:
            raise IntegrityViolationError(
                f"Unknown food choice id(s): {', '.join(str(i) for i in missing)}"
            )

    def list_rsvps(self) -> List[RsvpRecord]:
        """All RSVPs, newest first, each with its children in insertion order"""

        rsvps = (
            self.db.query(Rsvp)
            .order_by(Rsvp.created_at.desc(), Rsvp.id.desc())
            .all()
        )
        child_rows = (
            self.db.query(RsvpChild, FoodChoice.label)
            .join(FoodChoice, RsvpChild.food_choice_id == FoodChoice.id)
            .order_by(RsvpChild.id.asc())
            .all()
        )

        children_by_rsvp: Dict[int, List[RsvpChildRecord]] = {}
        for child, label in child_rows:
            children_by_rsvp.setdefault(child.rsvp_id, []).append(
                self._to_child_record(child, label)
            )

        return [
            RsvpRecord(
                id=rsvp.id,
                invite_name_entered=rsvp.invite_name_entered,
                phone=rsvp.phone,
                created_at=rsvp.created_at,
                children=tuple(children_by_rsvp.get(rsvp.id, [])),
            )
            for rsvp in rsvps
        ]

    def _to_record(self, rsvp: Rsvp, children: List[RsvpChild]) -> RsvpRecord:
        return RsvpRecord(
            id=rsvp.id,
            invite_name_entered=rsvp.invite_name_entered,
            phone=rsvp.phone,
            created_at=rsvp.created_at,
            children=tuple(
                self._to_child_record(
                    child, child.food_choice.label if child.food_choice else None
                )
                for child in children
            ),
        )

    @staticmethod
    def _to_child_record(child: RsvpChild, label: Optional[str]) -> RsvpChildRecord:
        return RsvpChildRecord(
            id=child.id,
            child_name=child.child_name,
            food_choice_id=child.food_choice_id,
            has_dietary_requirements=bool(child.has_dietary_requirements),
            dietary_requirements=child.dietary_requirements,
            food_choice_label=label,
        )
