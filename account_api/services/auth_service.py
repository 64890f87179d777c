import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from fastapi import Depends
from sqlalchemy.orm import Session

from account_api.config import settings
from account_api.database import get_db
from account_api.exceptions import DuplicateAccount, InvalidCredential, NotFound, ValidationError
from account_api.models.user import User
from account_api.services.account_store import AccountStore
from account_api.services.otp_service import generate_otp, otp_expiry, verify_otp
from account_api.services.password_service import hash_password, verify_password
from account_api.services.token_service import TokenIssuer, get_token_issuer
from account_api.services.validation_service import (
    DOB_MESSAGE,
    PASSWORD_MESSAGE,
    find_empty_profile_fields,
    is_valid_password,
    parse_dob,
    validate_signup,
)

logger = logging.getLogger(__name__)


@dataclass
class SignupResult:
    user: User
    otp: str


class AuthService:
    """Account lifecycle: signup, OTP verification, login, password reset.

    An account with ``otp``/``otp_expires`` set is waiting on a code, either
    from signup or from forgot-password. Using the code clears both fields.
    """

    def __init__(self, store: AccountStore, tokens: TokenIssuer, otp_ttl_minutes: int = 60):
        self.store = store
        self.tokens = tokens
        self.otp_ttl_minutes = otp_ttl_minutes

    def signup(self, fields: Mapping[str, Any]) -> SignupResult:
        errors = validate_signup(fields)
        if errors:
            raise ValidationError(errors)

        if self.store.find_by_email(fields["email"]):
            raise DuplicateAccount()

        otp = generate_otp()
        user = User(
            name=fields["name"],
            mobile=fields["mobile"],
            email=fields["email"],
            dob=parse_dob(fields["dob"]),
            gender=fields["gender"],
            address=fields["address"],
            password=hash_password(fields["password"]),
        )
        user.issue_otp(otp, otp_expiry(self.otp_ttl_minutes))
        self.store.insert(user)
        logger.info("Registered account id=%s, awaiting verification", user.id)
        return SignupResult(user=user, otp=otp)

    def verify_otp(self, mobile: str | None, otp: str | None) -> str:
        if not mobile or not otp:
            raise ValidationError("Mobile and OTP are required")

        user = self.store.find_by_mobile(mobile)
        if not user:
            raise InvalidCredential("Invalid mobile number or OTP")

        if not verify_otp(otp, user.otp, user.otp_expires):
            logger.warning("OTP verification failed for account id=%s", user.id)
            raise InvalidCredential("Invalid OTP")

        user.clear_otp()
        self.store.save(user)
        logger.info("Account id=%s verified", user.id)
        return self.tokens.issue(user.id)

    def login(self, email: str | None, password: str | None) -> str:
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.store.find_by_email(email)
        if not user or not verify_password(password, user.password):
            logger.warning("Rejected login attempt")
            raise InvalidCredential("Invalid credentials")

        logger.info("Account id=%s logged in", user.id)
        return self.tokens.issue(user.id)

    def forgot_password(self, email: str | None) -> str:
        if not email:
            raise ValidationError("Email is required")

        user = self.store.find_by_email(email)
        if not user:
            raise InvalidCredential("Invalid email")

        otp = generate_otp()
        user.issue_otp(otp, otp_expiry(self.otp_ttl_minutes))
        self.store.save(user)
        logger.info("Password reset requested for account id=%s", user.id)
        return otp

    def reset_password(self, email: str | None, otp: str | None, new_password: str | None) -> None:
        if not email or not otp or not new_password:
            raise ValidationError("Email, OTP, and new password are required")
        if not is_valid_password(new_password):
            raise ValidationError(PASSWORD_MESSAGE)

        user = self.store.find_by_email(email)
        if not user:
            raise InvalidCredential("Invalid email or OTP")

        if not verify_otp(otp, user.otp, user.otp_expires):
            logger.warning("Password reset OTP rejected for account id=%s", user.id)
            raise InvalidCredential("Invalid OTP")

        user.password = hash_password(new_password)
        user.clear_otp()
        self.store.save(user)
        logger.info("Password reset for account id=%s", user.id)

    def sign_out(self) -> None:
        # Tokens are not tracked server side; they stay valid until they expire.
        logger.debug("Sign-out requested")

    def update_profile(self, user_id: int, fields: Dict[str, Any]) -> User:
        empty = find_empty_profile_fields(fields)
        if empty:
            raise ValidationError(f"{', '.join(empty)} cannot be empty if provided")

        changes = dict(fields)
        if "dob" in changes:
            changes["dob"] = parse_dob(changes["dob"])
            if changes["dob"] is None:
                raise ValidationError(DOB_MESSAGE)

        user = self.store.update_by_id(user_id, changes, duplicate_message="Mobile number already in use")
        if not user:
            raise NotFound("User not found")
        logger.info("Profile updated for account id=%s fields=%s", user_id, sorted(changes))
        return user


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(
        AccountStore(db),
        get_token_issuer(),
        otp_ttl_minutes=settings.OTP_EXPIRE_MINUTES,
    )
