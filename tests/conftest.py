import pytest
from fastapi.testclient import TestClient

from netcfg_core.app import create_app
from netcfg_core.services import interfaces_service


@pytest.fixture
def client():
    """A fresh app and a registry holding only eth0."""
    interfaces_service.reset_interfaces()
    with TestClient(create_app()) as client:
        yield client
    interfaces_service.reset_interfaces()
