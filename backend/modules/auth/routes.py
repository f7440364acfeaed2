"""
Account API endpoints.

Mounted under /auth.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import AuthPolicy, auth_dependency
from shared.models import AuthContext

from .interfaces import IAuthService
from .models import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SignupRequest,
    SignupResponse,
    StatusResponse,
    StatusUpdateRequest,
)

router = APIRouter()

require_auth = auth_dependency(AuthPolicy.STRICT)


@router.put("/signup", response_model=SignupResponse, status_code=201)
async def signup(
    request: SignupRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SignupResponse:
    """
    Sign up a new user.

    Email must be valid and unused, password at least 5 characters,
    name not empty.
    """
    user = await service.signup(request.email, request.password, request.name)
    return SignupResponse(message="User created!", user_id=user.id)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Log in and receive a bearer token valid for one hour."""
    result = await service.login(request.email, request.password)
    return LoginResponse(token=result.token, user_id=result.user_id)


@router.get("/status", response_model=StatusResponse)
async def get_status(
    auth: AuthContext = Depends(require_auth),
    service: IAuthService = Depends(get_auth_service),
) -> StatusResponse:
    """Get the current user's status text."""
    return StatusResponse(status=await service.get_status(auth.user_id))


@router.patch("/status", response_model=MessageResponse)
async def update_status(
    request: StatusUpdateRequest,
    auth: AuthContext = Depends(require_auth),
    service: IAuthService = Depends(get_auth_service),
) -> MessageResponse:
    """Update the current user's status text."""
    await service.update_status(auth.user_id, request.status)
    return MessageResponse(message="User updated.")
