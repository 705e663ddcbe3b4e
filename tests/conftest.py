"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
"""

import io
from datetime import datetime, timezone
from typing import Dict, Iterator, Optional

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_application_service
from app.core.config import Settings
from app.core.exceptions import StorageError
from app.main import app
from app.rate_limiter.sliding_window import SlidingWindowRateLimiter
from app.services.application_service import ApplicationService
from app.storage.base import ObjectStore

#: Fixed submission time used by every service built in these fixtures.
FIXED_NOW = datetime(2026, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


# ── Test doubles ───────────────────────────────────────────────────────────────

class FakeClock:
    """Monotonic clock the test advances by hand."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class InMemoryObjectStore(ObjectStore):
    """ObjectStore that keeps objects in a dict and refuses overwrites."""

    def __init__(self) -> None:
        self.objects: Dict[str, bytes] = {}
        self.content_types: Dict[str, str] = {}
        self.fail_with: Optional[Exception] = None

    def upload(self, path: str, data: bytes, content_type: str) -> None:
        if self.fail_with is not None:
            raise StorageError("simulated outage") from self.fail_with
        if path in self.objects:
            raise StorageError(f"'{path}' already exists")
        self.objects[path] = data
        self.content_types[path] = content_type


# ── Core client fixture ────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def client() -> Iterator[TestClient]:
    """
    A synchronous TestClient wrapping the FastAPI app.

    session-scoped so the app is instantiated once per test run.
    The lifespan context (startup/shutdown events) is entered automatically.
    """
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


# ── Service fixtures ───────────────────────────────────────────────────────────

@pytest.fixture
def configured_settings() -> Settings:
    """Settings with storage credentials present and no .env lookup."""
    return Settings(
        _env_file=None,
        supabase_url="https://example.supabase.co",
        supabase_service_role_key="service-role-key",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryObjectStore:
    return InMemoryObjectStore()


@pytest.fixture
def limiter(clock: FakeClock) -> SlidingWindowRateLimiter:
    return SlidingWindowRateLimiter(max_requests=3, window_seconds=3600, clock=clock)


@pytest.fixture
def service(
    limiter: SlidingWindowRateLimiter,
    store: InMemoryObjectStore,
    configured_settings: Settings,
) -> ApplicationService:
    return ApplicationService(
        rate_limiter=limiter,
        store=store,
        config=configured_settings,
        now=lambda: FIXED_NOW,
    )


@pytest.fixture
def api(client: TestClient, service: ApplicationService) -> Iterator[TestClient]:
    """
    The shared client with POST /upload wired to the per-test ``service``,
    so each test starts with an empty limiter and an empty store.
    """
    app.dependency_overrides[get_application_service] = lambda: service
    try:
        yield client
    finally:
        app.dependency_overrides.pop(get_application_service, None)


# ── Sample file fixtures ───────────────────────────────────────────────────────

@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """
    Minimal bytes carrying a PDF header.
    Enough for the signature check; not a renderable document.
    """
    return b"%PDF-1.4\n%%EOF"


@pytest.fixture
def sample_pdf_file(sample_pdf_bytes) -> dict:
    """
    A ``files=`` mapping ready for TestClient.

    Usage:
        response = client.post("/upload", data=names, files=sample_pdf_file)
    """
    return {"file": ("cv.pdf", io.BytesIO(sample_pdf_bytes), "application/pdf")}


@pytest.fixture
def applicant() -> dict:
    """Valid name fields for the multipart form."""
    return {"firstName": "Marie", "lastName": "Curie"}
