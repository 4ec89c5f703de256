"""
Authentication service for credential login and user lookup.
"""
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.config import get_settings
from app.core.security import create_access_token, verify_password
from app.database.databases import directory_db
from app.models.user import User
from app.schemas.auth import LoginRequest, LoginResponse

CREDENTIAL_PROVIDER = "credential"


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the directory database."""
        self.db = db
        self.users_collection = db[directory_db.Collections.USERS]
        self.accounts_collection = db[directory_db.Collections.ACCOUNTS]
        self.settings = get_settings()

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return JWT token.

        The password is checked against the user's credential account.

        Raises:
            ValueError: If credentials are invalid or the user is banned
        """
        user_doc = await self.users_collection.find_one({"email": request.email})
        if not user_doc:
            raise ValueError("Invalid email or password")

        if user_doc.get("banned"):
            raise ValueError("Account is banned")

        # Imported accounts reference the user as ObjectId, older ones as string
        account = await self.accounts_collection.find_one({
            "userId": {"$in": [user_doc["_id"], str(user_doc["_id"])]},
            "providerId": CREDENTIAL_PROVIDER,
        })
        if not account or not account.get("password"):
            raise ValueError("Invalid email or password")

        if not verify_password(request.password, account["password"]):
            raise ValueError("Invalid email or password")

        return self._token_response(str(user_doc["_id"]), user_doc.get("role"))

    async def refresh_token(self, user: User) -> LoginResponse:
        """Issue a fresh token for an already authenticated user."""
        return self._token_response(user.id, user.role)

    def _token_response(self, user_id: str, role: Optional[str]) -> LoginResponse:
        access_token = create_access_token(user_id=user_id, role=role)
        return LoginResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=self.settings.jwt_access_token_expire_minutes * 60,
            user_id=user_id,
            role=role,
        )

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Returns:
            User model or None if not found or the id is malformed
        """
        try:
            user_doc = await self.users_collection.find_one({"_id": ObjectId(user_id)})
        except (InvalidId, TypeError):
            return None

        if not user_doc:
            return None

        user_doc["_id"] = str(user_doc["_id"])
        return User(**user_doc)
