import logging
from datetime import datetime, timedelta

from jose import JWTError, jwt

from account_api.config import settings
from account_api.exceptions import Unauthorized

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Signs and checks session tokens with a key fixed for its lifetime."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60):
        if not secret:
            raise ValueError("A token signing secret is required")
        self._secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, subject_id: int) -> str:
        now = datetime.utcnow()
        claims = {
            "sub": str(subject_id),
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
            return int(payload["sub"])
        except (JWTError, KeyError, TypeError, ValueError) as exc:
            logger.info("Rejected session token: %s", exc)
            raise Unauthorized("Invalid token") from exc


_issuer: TokenIssuer | None = None


def get_token_issuer() -> TokenIssuer:
    """Process-wide issuer built from settings on first use."""
    global _issuer
    if _issuer is None:
        _issuer = TokenIssuer(
            settings.JWT_SECRET,
            algorithm=settings.ALGORITHM,
            expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        )
    return _issuer
