"""
Authentication router for login and token refresh.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.database.connections import get_mongo_client
from app.database.databases import directory_db
from app.dependencies.auth import CurrentUser
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    TokenRefreshResponse,
    UserInfoResponse,
)
from app.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


async def get_auth_service() -> AuthService:
    """Dependency to get AuthService instance."""
    client = await get_mongo_client()
    return AuthService(client[directory_db.DB_NAME])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email and password to receive a JWT token.

    The token should be passed as a query parameter `token` to protected endpoints.
    """
    try:
        return await auth_service.login(body)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.post(
    "/refresh",
    response_model=TokenRefreshResponse,
    summary="Refresh access token",
)
async def refresh_token(
    current_user: CurrentUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Refresh the JWT token for an authenticated user.

    Requires valid token as query parameter: `?token=xxx`
    """
    result = await auth_service.refresh_token(current_user)
    return TokenRefreshResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        expires_in=result.expires_in,
    )


@router.get(
    "/me",
    response_model=UserInfoResponse,
    summary="Get current user info",
)
async def get_current_user_info(current_user: CurrentUser):
    """
    Get information about the currently authenticated user.

    Requires valid token as query parameter: `?token=xxx`
    """
    return {
        "id": current_user.id,
        "name": current_user.name,
        "email": current_user.email,
        "email_verified": current_user.email_verified,
        "role": current_user.role,
        "created_at": current_user.created_at,
    }
