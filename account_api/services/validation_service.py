"""Field rules for account data.

Signup rules are all evaluated, never short-circuited, and the messages are
returned in declaration order so the caller can join them into one response.
Profile updates use a lighter presence check on whichever fields were sent.
"""
import re
from datetime import date
from typing import Any, Dict, List, Mapping

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
GENDERS = {"male", "female", "other"}
PROFILE_FIELDS = ("name", "mobile", "dob", "gender", "address")

MOBILE_PATTERN = re.compile(r"[0-9]{10}")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
DOB_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

NAME_MESSAGE = f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
MOBILE_MESSAGE = "Mobile number must be 10 digits long"
EMAIL_MESSAGE = "Invalid email format"
DOB_MESSAGE = "Invalid date of birth format. Use YYYY-MM-DD"
GENDER_MESSAGE = "Invalid gender"
ADDRESS_MESSAGE = "Address is required"
PASSWORD_MESSAGE = f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"


def parse_dob(value: str) -> date | None:
    """Return the calendar date for a YYYY-MM-DD string, or None."""
    if not isinstance(value, str) or not DOB_PATTERN.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def is_valid_password(password: Any) -> bool:
    return isinstance(password, str) and len(password) >= PASSWORD_MIN_LENGTH


def validate_signup(fields: Mapping[str, Any]) -> List[str]:
    errors: List[str] = []

    name = fields.get("name")
    if not name or not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        errors.append(NAME_MESSAGE)

    mobile = fields.get("mobile")
    if not mobile or not MOBILE_PATTERN.fullmatch(mobile):
        errors.append(MOBILE_MESSAGE)

    # search, not fullmatch: surrounding text is tolerated like the pattern suggests
    email = fields.get("email")
    if not email or not EMAIL_PATTERN.search(email):
        errors.append(EMAIL_MESSAGE)

    if parse_dob(fields.get("dob")) is None:
        errors.append(DOB_MESSAGE)

    gender = fields.get("gender")
    if not gender or gender.lower() not in GENDERS:
        errors.append(GENDER_MESSAGE)

    if not fields.get("address"):
        errors.append(ADDRESS_MESSAGE)

    if not is_valid_password(fields.get("password")):
        errors.append(PASSWORD_MESSAGE)

    return errors


def find_empty_profile_fields(fields: Dict[str, Any]) -> List[str]:
    """Names of supplied profile fields whose value is empty."""
    return [key for key in PROFILE_FIELDS if key in fields and not fields[key]]
