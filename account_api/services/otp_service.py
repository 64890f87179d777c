import secrets
from datetime import datetime, timedelta
from typing import Optional

OTP_MIN = 100000
OTP_MAX = 999999


def generate_otp() -> str:
    """Six-digit numeric code drawn uniformly from [100000, 999999]."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


def otp_expiry(minutes: int, now: Optional[datetime] = None) -> datetime:
    return (now or datetime.utcnow()) + timedelta(minutes=minutes)


def verify_otp(
    candidate: Optional[str],
    stored: Optional[str],
    expires_at: Optional[datetime],
    now: Optional[datetime] = None,
) -> bool:
    """True only for an exact match strictly before ``expires_at``.

    Clearing the stored code after a successful check is left to the caller.
    """
    if not candidate or stored is None or expires_at is None:
        return False
    if not secrets.compare_digest(str(candidate).encode("utf-8"), stored.encode("utf-8")):
        return False
    return (now or datetime.utcnow()) < expires_at
