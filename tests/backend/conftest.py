"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with backend-specific helpers
for testing FastAPI routes and services.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures (real services on mock MongoDB)
# =============================================================================

@pytest_asyncio.fixture
async def member_service(populated_directory_db):
    """MemberService over the populated mock directory database."""
    from app.services.member_service import MemberService
    return MemberService(populated_directory_db)


@pytest_asyncio.fixture
async def department_service(mock_directory_db):
    """DepartmentService over an empty mock directory database."""
    from app.services.department_service import DepartmentService
    return DepartmentService(mock_directory_db)


# =============================================================================
# Mocked Service Fixtures
# =============================================================================

@pytest.fixture
def mock_member_service():
    """
    Create a fully mocked MemberService.

    All methods are AsyncMock, allowing you to configure return values:

        mock_member_service.get_members.return_value = {...}
    """
    service = MagicMock()
    service.get_members = AsyncMock()
    service.get_member_by_user_id = AsyncMock()
    service.get_member_by_name = AsyncMock()
    service.create_member = AsyncMock()
    service.update_member = AsyncMock()
    service.delete_member = AsyncMock()
    return service


@pytest.fixture
def mock_department_service():
    """Create a fully mocked DepartmentService."""
    service = MagicMock()
    service.list_departments = AsyncMock()
    service.get_department = AsyncMock()
    service.create_department = AsyncMock()
    service.update_department = AsyncMock()
    service.delete_department = AsyncMock()
    return service


@pytest.fixture
def mock_current_user():
    """The authenticated user returned by the auth dependency override."""
    from app.models.user import User

    return User(
        id="507f1f77bcf86cd799439011",
        name="Alice Johnson",
        email="alice@example.com",
        email_verified=True,
        role="admin",
    )


# =============================================================================
# App Override Helpers
# =============================================================================

@pytest.fixture
def authed_client(app, client, mock_current_user, mock_member_service, mock_department_service):
    """
    TestClient with authentication bypassed and services mocked.
    """
    from app.dependencies.auth import get_current_active_user
    from app.routers.departments import get_department_service
    from app.routers.members import get_member_service

    app.dependency_overrides[get_current_active_user] = lambda: mock_current_user
    app.dependency_overrides[get_member_service] = lambda: mock_member_service
    app.dependency_overrides[get_department_service] = lambda: mock_department_service
    return client


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
