from typing import Any, Dict
from fastapi import APIRouter, Depends
from app.api.deps import get_account_service, get_current_active_user
from app.core.security import TokenData
from app.schemas.account import RegisterRequest
from app.schemas.booking import MessageResponse
from app.schemas.common import APIResponse, ERROR_RESPONSES
from app.services.account_service import AccountService

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/register", response_model=MessageResponse)
async def register(
    details: RegisterRequest,
    current_user: TokenData = Depends(get_current_active_user),
    service: AccountService = Depends(get_account_service),
):
    """
    Register the authenticated uid as a customer, or as a storage provider when
    pincode, address, location, aadhar and pan are all supplied.
    """
    result = await service.register_user(current_user.id, details)
    return MessageResponse(**result)


@router.get("/me", response_model=APIResponse[Dict[str, Any]])
async def read_me(
    current_user: TokenData = Depends(get_current_active_user),
    service: AccountService = Depends(get_account_service),
) -> Any:
    profile = await service.get_user(current_user.id)
    return APIResponse(data=profile.model_dump(mode="json", by_alias=True))
