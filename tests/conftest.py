"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - fresh_controller: Discards the global drop controller around each test
    - config: Extractor configuration with defaults
    - controller: A DropController recording alerts and notifications
    - async_client: HTTPX client for API testing
    - ada_form_pdf: One text field "FirstName" set to "Ada"
"""

from collections.abc import AsyncGenerator, Generator

import pytest
from httpx import ASGITransport, AsyncClient

from src.api import app
from src.extraction.config import ExtractorConfig
from src.extraction.controller import DropController, reset_controller
from tests.pdf_factory import build_form_pdf, text


class RecordingController(DropController):
    """DropController that keeps every alert and output notification."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.alerts: list[str] = []
        self.notifications: list[str] = []
        self.add_alert_listener(self.alerts.append)
        self.add_output_listener(self.notifications.append)


@pytest.fixture(autouse=True)
def fresh_controller() -> Generator[None]:
    """Start and finish every test without a global controller."""
    reset_controller()
    yield
    reset_controller()


@pytest.fixture
def config() -> ExtractorConfig:
    """Return configuration with explicit defaults.

    Returns:
        ExtractorConfig independent of the environment.
    """
    return ExtractorConfig(
        max_file_size=10 * 1024 * 1024,
        initial_reset_trigger=0,
        accepted_mime_type="application/pdf",
    )


@pytest.fixture
def controller(config: ExtractorConfig) -> RecordingController:
    """Return an idle controller that records alerts and notifications."""
    return RecordingController(config=config)


@pytest.fixture
def ada_form_pdf() -> bytes:
    """Return PDF bytes with a single text field FirstName = Ada."""
    return build_form_pdf(text("FirstName", "Ada"))


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
