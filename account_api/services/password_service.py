import bcrypt

from account_api.config import settings

# bcrypt only considers the first 72 bytes of a secret
_MAX_SECRET_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:_MAX_SECRET_BYTES]


def hash_password(plaintext: str, rounds: int | None = None) -> str:
    """Salted digest; algorithm, cost and salt are embedded in the result."""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(plaintext), salt).decode("utf-8")


def verify_password(plaintext: str, digest: str) -> bool:
    """Constant-time check. Raises ValueError only for a malformed digest."""
    return bcrypt.checkpw(_encode(plaintext), digest.encode("utf-8"))
