# Shared pytest configuration and fixtures for all test types
import logging
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from slowapi import Limiter
from slowapi.util import get_remote_address
from unittest.mock import AsyncMock, patch

from common.core.config import settings
from tests.fixtures import SIGNED_URL_TEMPLATE
from tests.fixtures.fake_sandbox import FakeSandbox

# Create test limiter with no limits and in-memory storage
test_limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[],
    storage_uri="memory://",
)

# Patch the limiter before importing the app so decorators use test limiter
with patch("common.providers.rate_limiter.limiter.limiter", test_limiter):
    from api.main import app

from packages.compilation.routes.compile import get_latex_compile_service
from packages.compilation.services.latex_compile_service import LatexCompileService

TEST_API_KEY = "test-api-key"
WORKSPACE_DIR = "/workspace"


@pytest.fixture(autouse=True)
def configured_api_key(monkeypatch):
    """Configure the shared secret for every test."""
    monkeypatch.setattr(settings, "api_key", TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def fake_sandbox():
    """Create an in-memory sandbox simulating tectonic, curl and find."""
    return FakeSandbox()


@pytest.fixture
def mock_storage():
    """Create a mock storage signer returning deterministic presigned URLs."""
    storage = AsyncMock()

    async def sign(key, expiration=3600):
        return SIGNED_URL_TEMPLATE.format(key=key)

    storage.generate_presigned_upload_url = AsyncMock(side_effect=sign)
    storage.get_storage_uri = AsyncMock(
        side_effect=lambda key: f"s3://latex-box/{key}"
    )
    return storage


@pytest.fixture
def compile_service(fake_sandbox, mock_storage):
    """Create the pipeline wired to the fake sandbox and mock storage."""
    return LatexCompileService(
        sandbox=fake_sandbox,
        storage=mock_storage,
        logger=logging.getLogger("tests.pipeline"),
        workspace_dir=WORKSPACE_DIR,
    )


@pytest_asyncio.fixture(scope="function")
async def client(compile_service):
    """Create a test client."""
    app.dependency_overrides[get_latex_compile_service] = lambda: compile_service

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
