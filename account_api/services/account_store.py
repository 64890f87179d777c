import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from account_api.exceptions import DuplicateAccount, StorageError
from account_api.models.user import User

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"name", "mobile", "dob", "gender", "address"}


class AccountStore:
    """Persistence for user accounts on top of a SQLAlchemy session.

    Email and mobile uniqueness is enforced by unique indexes, so a losing
    concurrent insert surfaces as DuplicateAccount. ``save`` is last write wins.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        return self._first(User.email == email)

    def find_by_mobile(self, mobile: str) -> Optional[User]:
        return self._first(User.mobile == mobile)

    def find_by_id(self, user_id: int) -> Optional[User]:
        try:
            return self.db.get(User, user_id)
        except SQLAlchemyError as exc:
            logger.exception("Account lookup failed for id=%s", user_id)
            raise StorageError() from exc

    def insert(self, user: User, duplicate_message: str = "User already exists") -> User:
        _check_otp_pair(user)
        self.db.add(user)
        self._commit(duplicate_message)
        self.db.refresh(user)
        logger.info("Inserted account id=%s", user.id)
        return user

    def update_by_id(
        self,
        user_id: int,
        fields: Dict[str, Any],
        duplicate_message: str = "User already exists",
    ) -> Optional[User]:
        user = self.find_by_id(user_id)
        if not user:
            return None
        for field, value in fields.items():
            if field not in UPDATABLE_FIELDS:
                raise ValueError(f"Field {field!r} cannot be updated")
            setattr(user, field, value)
        self._commit(duplicate_message)
        self.db.refresh(user)
        return user

    def save(self, user: User) -> User:
        _check_otp_pair(user)
        self._commit()
        return user

    def _first(self, criterion) -> Optional[User]:
        try:
            return self.db.query(User).filter(criterion).first()
        except SQLAlchemyError as exc:
            logger.exception("Account lookup failed")
            raise StorageError() from exc

    def _commit(self, duplicate_message: str = "User already exists") -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Uniqueness violation: %s", exc.orig)
            raise DuplicateAccount(duplicate_message) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Account write failed")
            raise StorageError() from exc


def _check_otp_pair(user: User) -> None:
    if (user.otp is None) != (user.otp_expires is None):
        raise ValueError("otp and otp_expires must be set or cleared together")
