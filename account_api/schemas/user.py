from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


# Request bodies carry optional strings; presence and format rules are applied
# by the validation service so that every violation is reported in one message.
class SignupRequest(BaseModel):
    name: str | None = None
    mobile: str | None = None
    email: str | None = None
    dob: str | None = None
    gender: str | None = None
    address: str | None = None
    password: str | None = None


class VerifyOtp(BaseModel):
    mobile: str | None = None
    otp: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class ForgotPasswordRequest(BaseModel):
    email: str | None = None


class ResetPasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    otp: str | None = None
    new_password: str | None = Field(default=None, alias="newPassword")


class ProfileUpdate(BaseModel):
    name: str | None = None
    mobile: str | None = None
    dob: str | None = None
    gender: str | None = None
    address: str | None = None


class ProfileResponse(BaseModel):
    id: int
    name: str
    mobile: str
    email: str
    dob: date
    gender: str
    address: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
