from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials

from account_api.config import settings
from account_api.exceptions import Unauthorized
from account_api.services.token_service import TokenIssuer, get_token_issuer


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(settings.bearer_scheme),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> int:
    """Resolve the bearer token to the account id it was issued for."""
    if credentials is None or not credentials.credentials:
        raise Unauthorized("No token provided")
    return tokens.verify(credentials.credentials)
