import logging
from typing import List, Tuple

import pytest

from library_catalog.library import CatalogManager, CatalogRegistry
from library_catalog.services.notification_service import NotificationChannel
from library_catalog.ui_helpers import OUTPUT_MODE_ENV


class RecordingChannel(NotificationChannel):
    """Test double that keeps every (recipient, message) pair it is given."""

    def __init__(self) -> None:
        self.sent: List[Tuple[str, str]] = []

    def send_notification(self, recipient_id: str, message: str) -> None:
        self.sent.append((recipient_id, message))


@pytest.fixture
def channel():
    return RecordingChannel()


@pytest.fixture
def manager(channel):
    return CatalogManager(channel)


@pytest.fixture(autouse=True)
def isolate_globals(monkeypatch):
    # Each test gets a fresh shared manager, default output mode and no handlers
    monkeypatch.delenv(OUTPUT_MODE_ENV, raising=False)
    CatalogRegistry.reset()
    yield
    CatalogRegistry.reset()
    package_logger = logging.getLogger("library_catalog")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
