"""Shared fixtures."""

import httpx
import pytest
from fastapi import FastAPI

from helpers import API_URL, build_fake_service
from package_order.order_client import OrderApiClient
from package_order.workflow import OrderWorkflow


@pytest.fixture
def fake_service() -> FastAPI:
    return build_fake_service()


@pytest.fixture
def service_api(fake_service: FastAPI) -> OrderApiClient:
    """API client wired to the fake service in-process."""
    client = httpx.AsyncClient(transport=httpx.ASGITransport(app=fake_service), base_url=API_URL)
    return OrderApiClient(base_url=API_URL, client=client)


@pytest.fixture
def service_workflow(service_api: OrderApiClient) -> OrderWorkflow:
    return OrderWorkflow(service_api)
