"""Authentication service for password login."""

from datetime import timedelta

from bloglist.configs import settings
from bloglist.errors.auth import InvalidCredentialsError
from bloglist.managers.password_manager import verify_password
from bloglist.managers.token_manager import create_access_token
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import UserRepository
from bloglist.schemas.auth import Token

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str, password: str | None) -> UserDB:
        """
        Authenticate a user by username and password.

        Args:
            username: User username
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username)

        # verify_password runs a dummy hash for unknown users so timing stays flat
        verified = await verify_password(password or "", user.password_hash if user else None)
        if not user or not password or not verified:
            logger.info(f"Failed login attempt for username {username!r}")
            raise InvalidCredentialsError

        return user

    def create_token_for_user(self, user: UserDB) -> Token:
        """
        Create an access token for a user.

        Args:
            user: User entity

        Returns:
            Token: Token object with the access token and the user's names
        """
        access_token = create_access_token(
            user_id=user.id,
            username=user.username,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )

        return Token(
            access_token=access_token,
            token_type="bearer",
            username=user.username,
            name=user.name,
        )
