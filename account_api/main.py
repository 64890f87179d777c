import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from account_api.config import settings
from account_api.database import Base, engine
from account_api.exceptions import Unauthorized
from account_api.routers import auth, users
from account_api.services.token_service import get_token_issuer
from account_api.utils.response import create_response, error_response, handle_exception

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

# CORS for SPA / API access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup_event():
    # Fails fast when JWT_SECRET is missing
    get_token_issuer()
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready, %s listening on port %s", settings.PROJECT_NAME, settings.PORT)


# The auth gate runs as a dependency, before any route-level try/except.
@app.exception_handler(Unauthorized)
async def unauthorized_handler(request: Request, exc: Unauthorized):
    return error_response(exc.message, exc.status_code, success_envelope=True)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Only where and why; the rejected input may be an OTP or a password.
    problems = [(error.get("loc"), error.get("type")) for error in exc.errors()]
    logger.info("Malformed request body on %s: %s", request.url.path, problems)
    return error_response(
        "Invalid request body",
        status.HTTP_400_BAD_REQUEST,
        success_envelope=request.url.path.startswith(users.router.prefix),
    )


# Add routes
app.include_router(auth.router)
app.include_router(users.router)


@app.get("/")
def home():
    try:
        return create_response(msg=f"{settings.PROJECT_NAME} running")
    except Exception as exc:
        return handle_exception(exc)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
