# 📄 File: agroscan/modules/user_management/domain/services/auth_service.py
# 🧭 Purpose (Layman Explanation):
# Handles signing up and logging in: it makes sure an email is only used once, scrambles
# the password before storing it, and hands back a login pass (token) that expires.
# 🧪 Purpose (Technical Summary):
# Domain service implementing registration and login. Registration forces the Farmer role,
# hashes the password and issues a JWT; login returns one generic failure message for both
# unknown email and wrong password.
# 🔗 Dependencies:
# UserRepository, agroscan.shared.core.security (PasswordHasher, TokenService), DTOs
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.auth (register/login endpoints)

import logging
from datetime import datetime, timezone

from fastapi import Depends

from ..models.user import UserRole
from ..repositories.user_repository import UserRepository
from agroscan.modules.user_management.application.dto.user_dto import (
    AuthResponseDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    UserDTO,
)
from agroscan.modules.user_management.infrastructure.database.models import UserModel
from agroscan.shared.core.exceptions import AuthenticationError, DuplicateResourceError
from agroscan.shared.core.security import (
    PasswordHasher,
    TokenService,
    get_password_hasher,
    get_token_service,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthService:
    """
    Domain service for registration and login.

    Business rules:
    - Email addresses are unique across users
    - Self-registered accounts are always Farmers
    - Login failures never reveal whether the email exists
    """

    def __init__(
        self,
        user_repository: UserRepository = Depends(),
        password_hasher: PasswordHasher = Depends(get_password_hasher),
        token_service: TokenService = Depends(get_token_service),
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def register(self, data: RegisterRequestDTO) -> AuthResponseDTO:
        """
        Register a new Farmer account and sign them in.

        Args:
            data: Registration details (any supplied role is ignored)

        Returns:
            AuthResponseDTO: Token, expiry and the created user

        Raises:
            DuplicateResourceError: If the email is already registered
        """
        if await self.user_repository.email_exists(data.email):
            logger.warning(f"Registration rejected, email already exists: {data.email}")
            raise DuplicateResourceError("Email already exists", resource_type="user", field="email")

        now = datetime.now(timezone.utc)
        user = UserModel(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            password_hash=self.password_hasher.hash(data.password),
            role=UserRole.FARMER,
            created_at=now,
            updated_at=now,
        )

        await self.user_repository.add(user)
        await self.user_repository.commit()

        logger.info(f"User registered: {user.id}")
        return self._build_response(user)

    async def login(self, data: LoginRequestDTO) -> AuthResponseDTO:
        """
        Authenticate with email and password.

        Raises:
            AuthenticationError: With the same message whether the email is
                unknown or the password is wrong
        """
        user = await self.user_repository.get_by_email(data.email)
        if user is None:
            logger.warning("Login failed: unknown email")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        if not self.password_hasher.verify(data.password, user.password_hash):
            logger.warning(f"Login failed: wrong password for user {user.id}")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        logger.info(f"User logged in: {user.id}")
        return self._build_response(user)

    def _build_response(self, user: UserModel) -> AuthResponseDTO:
        issued = self.token_service.issue(user)
        return AuthResponseDTO(
            token=issued.token,
            expires_at=issued.expires_at,
            user=UserDTO.model_validate(user),
        )
