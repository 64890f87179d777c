from fastapi import APIRouter, Depends, status

from account_api.schemas.user import ProfileResponse, ProfileUpdate
from account_api.services.auth_middleware import get_current_user_id
from account_api.services.auth_service import AuthService, get_auth_service
from account_api.utils.response import create_response, error_response, handle_exception

router = APIRouter(prefix="/api/user", tags=["User"])


@router.put("/update-profile")
def update_profile(
    update: ProfileUpdate,
    user_id: int = Depends(get_current_user_id),
    service: AuthService = Depends(get_auth_service),
):
    update_data = update.model_dump(exclude_unset=True)
    if not update_data:
        return error_response(
            "Request body cannot be empty, Unauthorized!",
            status.HTTP_401_UNAUTHORIZED,
            success_envelope=True,
        )
    try:
        user = service.update_profile(user_id, update_data)
        profile_payload = ProfileResponse.model_validate(user).model_dump()
        return create_response(success=True, user=profile_payload)
    except Exception as exc:
        return handle_exception(exc, success_envelope=True)
