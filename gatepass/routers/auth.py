# gatepass/routers/auth.py
"""Login for students, moderators and gatekeepers."""

from fastapi import APIRouter, Depends

from gatepass.database import get_store
from gatepass.dependencies import get_auth_service
from gatepass.schemas.responses import ErrorResponse, LoginResponse
from gatepass.schemas.user import LoginRequest
from gatepass.services.auth_service import AuthService

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Check a username/password pair",
)
def login(body: LoginRequest, store=Depends(get_store), auth: AuthService = Depends(get_auth_service)):
    """Returns the user's profile (without password). 401 on mismatch."""
    user = auth.login(store, body.username, body.password)
    return LoginResponse(user=user)
