import logging

from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from account_api.exceptions import AccountServiceError

logger = logging.getLogger(__name__)


def create_response(content=None, status_code: int = status.HTTP_200_OK, **fields) -> JSONResponse:
    """Return a JSON response; keyword fields become top-level body keys."""
    body = content if content is not None else fields
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def error_response(message: str, status_code: int, success_envelope: bool = False) -> JSONResponse:
    if success_envelope:
        return create_response(success=False, message=message, status_code=status_code)
    return create_response(msg=message, status_code=status_code)


def handle_exception(
    error: Exception,
    fallback_message: str = "Server error",
    success_envelope: bool = False,
) -> JSONResponse:
    """Coerce raised errors into the response body the route family uses.

    Domain and HTTP errors keep their message; anything else is logged and
    answered with a generic 500 so internal detail never reaches the client.
    """
    if isinstance(error, AccountServiceError) and error.status_code < 500:
        return error_response(error.message, error.status_code, success_envelope)

    if isinstance(error, HTTPException):
        detail = error.detail if isinstance(error.detail, str) else str(error.detail)
        return error_response(detail, error.status_code, success_envelope)

    logger.exception("Unhandled error while serving request", exc_info=error)
    return error_response(fallback_message, status.HTTP_500_INTERNAL_SERVER_ERROR, success_envelope)
