from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Dict, Iterator, List, Optional
from dataclasses import dataclass
import csv
import io
import logging

from ..models.invite import Invite
from ..utils.constants import AppConstants, InviteNameMatch, Messages
from ..utils.validation import ValidationHelpers
from .errors import PersistenceError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportResult:
    inserted: int
    missing_name: int
    duplicates: int
    malformed: int = 0

    @property
    def skipped(self) -> int:
        return self.missing_name + self.duplicates + self.malformed

    def as_dict(self) -> Dict[str, int]:
        return {
            "inserted": self.inserted,
            "skipped": self.skipped,
            "missing_name": self.missing_name,
            "duplicates": self.duplicates,
            "malformed": self.malformed,
        }


class InviteService:
    def __init__(self, db: Session, name_match: InviteNameMatch = InviteNameMatch.EXACT):
        self.db = db
        self.name_match = name_match

    def list_invites(self) -> List[Invite]:
        return self.db.query(Invite).order_by(Invite.created_at, Invite.id).all()

    def import_invites(self, data: bytes) -> ImportResult:
        """
        Merge a CSV guest list into the invites table.

        Rows are independent: each one is committed on its own and the rest
        of the file is always processed. Rows are skipped when they have no
        name, when the name is already on the list, or when they are
        malformed (unparseable, or a value longer than its column). Re-importing
        a file is a no-op for names that are already present.
        """
        max_bytes = AppConstants.MAX_UPLOAD_SIZE_MB * 1024 * 1024
        if len(data) > max_bytes:
            raise ValidationError(
                f"File is too large (max {AppConstants.MAX_UPLOAD_SIZE_MB} MB)"
            )

        try:
            content = data.decode(AppConstants.CSV_ENCODING)
        except UnicodeDecodeError:
            raise ValidationError("File must be UTF-8 encoded CSV")

        inserted = missing_name = duplicates = malformed = 0

        for row_number, record in self._read_records(content):
            if record is None:
                malformed += 1
                continue

            invite_name = self._resolve_name(record)
            if not invite_name:
                missing_name += 1
                logger.debug(f"Import row {row_number}: no invite name, skipped")
                continue

            phone = ValidationHelpers.clean_text(
                record.get(AppConstants.INVITE_PHONE_COLUMN)
            )
            name_key = ValidationHelpers.invite_name_key(invite_name, self.name_match)
            if not self._fits_columns(invite_name, name_key, phone):
                malformed += 1
                logger.warning(
                    f"Import row {row_number}: value longer than the column allows, skipped"
                )
                continue

            if self._insert_if_new(invite_name, name_key, phone, row_number):
                inserted += 1
            else:
                duplicates += 1

        result = ImportResult(
            inserted=inserted,
            missing_name=missing_name,
            duplicates=duplicates,
            malformed=malformed,
        )
        logger.info(
            f"Invite import finished: {result.inserted} inserted, "
            f"{result.skipped} skipped ({result.missing_name} without a name, "
            f"{result.duplicates} already invited, {result.malformed} malformed)"
        )
        return result

    def _read_records(self, content: str) -> Iterator[tuple]:
        """Yield (line number, record); record is None for a row that failed to parse"""
        reader = csv.DictReader(io.StringIO(content), skipinitialspace=True)
        try:
            fieldnames = reader.fieldnames
        except csv.Error as e:
            raise ValidationError(f"Malformed CSV header: {e}")
        if fieldnames is None:
            return

        headers = [(h or "").strip() for h in fieldnames]
        reader.fieldnames = headers
        if not any(col in headers for col in AppConstants.INVITE_NAME_COLUMNS):
            logger.warning(
                f"Invite import has no name column (expected one of "
                f"{', '.join(AppConstants.INVITE_NAME_COLUMNS)}), got {headers}"
            )

        while True:
            line_before = reader.line_num
            try:
                record = next(reader)
            except StopIteration:
                return
            except csv.Error as e:
                logger.warning(f"Import row {reader.line_num}: malformed CSV, skipped ({e})")
                yield reader.line_num, None
                # the parser consumed nothing; stop instead of retrying the same input
                if reader.line_num == line_before:
                    return
                continue

            yield reader.line_num, {
                key: value.strip() if isinstance(value, str) else value
                for key, value in record.items()
                if key is not None
            }

    @staticmethod
    def _resolve_name(record: Dict[str, Optional[str]]) -> Optional[str]:
        for column in AppConstants.INVITE_NAME_COLUMNS:
            value = ValidationHelpers.clean_text(record.get(column))
            if value:
                return value
        return None

    @staticmethod
    def _fits_columns(invite_name: str, name_key: str, phone: Optional[str]) -> bool:
        return (
            ValidationHelpers.validate_length(invite_name, AppConstants.MAX_NAME_LENGTH)
            and ValidationHelpers.validate_length(name_key, AppConstants.MAX_NAME_LENGTH)
            and ValidationHelpers.validate_length(phone, AppConstants.MAX_PHONE_LENGTH)
        )

    def _insert_if_new(
        self, invite_name: str, name_key: str, phone: Optional[str], row_number: int
    ) -> bool:
        """Insert one invite in its own transaction; False if already present"""
        try:
            self.db.add(Invite(invite_name=invite_name, name_key=name_key, phone=phone))
            self.db.commit()
            return True
        except IntegrityError:
            self.db.rollback()
            logger.debug(f"Import row {row_number}: '{invite_name}' already invited")
            return False
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Invite import stopped at row {row_number}: {e}", exc_info=True
            )
            raise PersistenceError(Messages.IMPORT_FAILED)
