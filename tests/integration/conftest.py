"""Pytest configuration and fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import (
    get_purchase_order_queue,
    get_purchase_order_service,
    get_queue_driver,
    reset_dependencies,
)
from api.main import app
from core.application.services.purchase_order_service import PurchaseOrderService
from orchestration import QueueProcessingDriver


@pytest.fixture
def purchase_order_service(repository, queue) -> PurchaseOrderService:
    return PurchaseOrderService(repository, enqueue=queue.enqueue)


@pytest.fixture
def test_client(queue, queue_settings, purchase_order_service) -> TestClient:
    """Create FastAPI test client wired to in-memory collaborators."""
    driver = QueueProcessingDriver(queue, lambda: queue_settings)

    app.dependency_overrides[get_purchase_order_queue] = lambda: queue
    app.dependency_overrides[get_purchase_order_service] = lambda: purchase_order_service
    app.dependency_overrides[get_queue_driver] = lambda: driver

    client = TestClient(app)
    yield client

    # Cleanup
    app.dependency_overrides.clear()
    reset_dependencies()
