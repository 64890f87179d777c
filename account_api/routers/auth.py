from fastapi import APIRouter, Body, Depends, status

from account_api.schemas.user import (
    ForgotPasswordRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
    VerifyOtp,
)
from account_api.services.auth_service import AuthService, get_auth_service
from account_api.utils.response import create_response, error_response, handle_exception

router = APIRouter(prefix="/api/auth", tags=["Auth"])

EMPTY_BODY = "Request body cannot be empty, Unauthorized"


# OTPs are returned in the body until an SMS/email delivery channel exists.
@router.post("/signup")
def signup(
    body: SignupRequest | None = Body(default=None),
    service: AuthService = Depends(get_auth_service),
):
    if body is None or not body.model_fields_set:
        return error_response("Request body cannot be empty!", status.HTTP_400_BAD_REQUEST)
    try:
        result = service.signup(body.model_dump())
        return create_response(
            msg="User registered. OTP sent to mobile.",
            otp=result.otp,
            status_code=status.HTTP_201_CREATED,
        )
    except Exception as exc:
        return handle_exception(exc)


@router.post("/verify-otp")
def verify_otp(
    body: VerifyOtp | None = Body(default=None),
    service: AuthService = Depends(get_auth_service),
):
    if body is None or not body.model_fields_set:
        return error_response(EMPTY_BODY, status.HTTP_400_BAD_REQUEST)
    try:
        token = service.verify_otp(body.mobile, body.otp)
        return create_response(token=token)
    except Exception as exc:
        return handle_exception(exc)


@router.post("/login")
def login(
    body: LoginRequest | None = Body(default=None),
    service: AuthService = Depends(get_auth_service),
):
    if body is None or not body.model_fields_set:
        return error_response(EMPTY_BODY, status.HTTP_400_BAD_REQUEST)
    try:
        token = service.login(body.email, body.password)
        return create_response(success=True, message="Login successful", token=token)
    except Exception as exc:
        return handle_exception(exc)


@router.post("/forgot-password")
def forgot_password(
    body: ForgotPasswordRequest | None = Body(default=None),
    service: AuthService = Depends(get_auth_service),
):
    if body is None or not body.model_fields_set:
        return error_response(EMPTY_BODY, status.HTTP_400_BAD_REQUEST)
    try:
        otp = service.forgot_password(body.email)
        return create_response(msg="OTP sent to email.", otp=otp)
    except Exception as exc:
        return handle_exception(exc)


@router.post("/reset-password")
def reset_password(
    body: ResetPasswordRequest | None = Body(default=None),
    service: AuthService = Depends(get_auth_service),
):
    if body is None or not body.model_fields_set:
        return error_response(EMPTY_BODY, status.HTTP_400_BAD_REQUEST)
    try:
        service.reset_password(body.email, body.otp, body.new_password)
        return create_response(msg="Password reset successful")
    except Exception as exc:
        return handle_exception(exc)


@router.get("/signout")
def sign_out(service: AuthService = Depends(get_auth_service)):
    try:
        service.sign_out()
        response = create_response("User has been logged out!")
        response.delete_cookie("access_token")
        return response
    except Exception as exc:
        return handle_exception(exc)
