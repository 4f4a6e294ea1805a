"""
Shared fixtures: an in-memory SQLite database per test, services wired to
real repositories, and an HTTP client bound to the application.
"""

import os
import tempfile

# Settings are read once, on first import of the application
os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-that-is-long-enough-0123456789"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["DB_AUTO_CREATE"] = "true"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_FORMAT"] = "text"
os.environ["UPLOAD_ROOT"] = tempfile.mkdtemp(prefix="agroscan-uploads-")

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from agroscan.main import app
from agroscan.modules.inspection_management.domain.services.inspection_analysis_service import (
    InspectionAnalysisService,
)
from agroscan.modules.inspection_management.domain.services.inspection_image_service import (
    InspectionImageService,
)
from agroscan.modules.inspection_management.domain.services.inspection_service import InspectionService
from agroscan.modules.inspection_management.infrastructure.database.inspection_analysis_repository_impl import (
    InspectionAnalysisRepositoryImpl,
)
from agroscan.modules.inspection_management.infrastructure.database.inspection_image_repository_impl import (
    InspectionImageRepositoryImpl,
)
from agroscan.modules.inspection_management.infrastructure.database.inspection_repository_impl import (
    InspectionRepositoryImpl,
)
from agroscan.modules.user_management.domain.models.user import UserRole
from agroscan.modules.user_management.domain.services.auth_service import AuthService
from agroscan.modules.user_management.domain.services.user_service import UserService
from agroscan.modules.user_management.infrastructure.database.models import UserModel
from agroscan.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from agroscan.shared.config.settings import get_settings
from agroscan.shared.core.security import get_password_hasher, get_token_service
from agroscan.shared.infrastructure.database.connection import close_database, db_manager, init_database
from agroscan.shared.infrastructure.database.session import session_manager
from agroscan.shared.infrastructure.storage.file_manager import get_file_storage

PASSWORD = "Secret123"


@pytest.fixture
async def engine():
    await init_database(get_settings())
    session_manager.initialize(db_manager.engine)
    yield db_manager.engine
    await close_database()


@pytest.fixture
async def session(engine):
    async with session_manager.get_session() as session:
        yield session


@pytest.fixture
def password_hasher():
    return get_password_hasher()


@pytest.fixture
def token_service():
    return get_token_service()


@pytest.fixture
def auth_service(session, password_hasher, token_service):
    return AuthService(
        user_repository=UserRepositoryImpl(session),
        password_hasher=password_hasher,
        token_service=token_service,
    )


@pytest.fixture
def user_service(session, password_hasher):
    return UserService(user_repository=UserRepositoryImpl(session), password_hasher=password_hasher)


@pytest.fixture
def inspection_service(session):
    return InspectionService(inspection_repository=InspectionRepositoryImpl(session))


@pytest.fixture
def image_service(session):
    return InspectionImageService(
        image_repository=InspectionImageRepositoryImpl(session),
        inspection_repository=InspectionRepositoryImpl(session),
        file_storage=get_file_storage(),
    )


@pytest.fixture
def analysis_service(session):
    return InspectionAnalysisService(
        analysis_repository=InspectionAnalysisRepositoryImpl(session),
        inspection_repository=InspectionRepositoryImpl(session),
    )


async def create_user(session, password_hasher, email, role=UserRole.FARMER, first_name="Test", last_name="User"):
    """Insert a user directly, bypassing registration (which forces Farmer)."""
    now = datetime.now(timezone.utc)
    user = UserModel(
        first_name=first_name,
        last_name=last_name,
        email=email,
        password_hash=password_hasher.hash(PASSWORD),
        role=role,
        created_at=now,
        updated_at=now,
    )
    session.add(user)
    await session.commit()
    return user


@pytest.fixture
async def farmer(session, password_hasher):
    return await create_user(session, password_hasher, "farmer.a@example.com", first_name="Ana", last_name="Lee")


@pytest.fixture
async def other_farmer(session, password_hasher):
    return await create_user(session, password_hasher, "farmer.b@example.com", first_name="Ben", last_name="Ortiz")


@pytest.fixture
async def admin(session, password_hasher):
    return await create_user(session, password_hasher, "admin@example.com", role=UserRole.ADMIN)


@pytest.fixture
async def client(engine):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def token_for(token_service):
    """Sign a token for a stored user without going through login."""
    def _token_for(user) -> str:
        return token_service.issue(user).token
    return _token_for
