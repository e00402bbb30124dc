"""
Pytest fixtures and configuration for Customer Connect Console tests

This file provides shared fixtures that can be used across all test modules.
The REST backend is replaced by an httpx MockTransport, so no test needs a
running backend.

Author: Customer Connect Team
Date: 2025-11-07
"""
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.connectors.api_service import ApiService
from app.core.token_store import TokenStore
from app.dependencies import get_api_service
from app.main import app

BACKEND_URL = "http://backend.test/api"

ADMIN_USER = {
    "id": 1,
    "username": "admin",
    "email_id": "admin@example.com",
    "role": "admin",
}

CUSTOMER_USER = {
    "id": 7,
    "username": "acme",
    "email_id": "buyer@acme.com",
    "role": "customer",
    "customer_code": "CUST12345601",
    "userRole": {
        "permissions": {
            "dashboard": {"view": True},
            "products": {"view": True},
            "orders": {"view": True},
            "meetings": {"view": False},
            "market_reports": True,
        }
    },
}


class FakeBackend:
    """
    Routes requests to canned responses and records every request

    Usage:
        backend.add("GET", "/products", {"products": []})
        backend.add("POST", "/users", {"message": "boom"}, status=500)
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, body=None, status=200, content=None):
        self.routes[(method, path)] = (status, body, content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len("/api"):]
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"message": f"No route for {request.method} {path}"})

        status, body, content = route
        if callable(body):
            return body(request)
        if content is not None:
            return httpx.Response(status, content=content)
        return httpx.Response(status, json=body if body is not None else {})

    def calls(self, method=None, path=None):
        return [
            request for request in self.requests
            if (method is None or request.method == method)
            and (path is None or request.url.path[len("/api"):] == path)
        ]

    def json_body(self, request: httpx.Request):
        return json.loads(request.content)


@pytest.fixture
def backend():
    """Fresh fake REST backend for each test"""
    return FakeBackend()


@pytest.fixture
def token_store():
    return TokenStore()


@pytest.fixture
def api_service(backend, token_store):
    """ApiService wired to the fake backend with an in-memory session"""
    return ApiService(
        base_url=BACKEND_URL,
        token_store=token_store,
        transport=httpx.MockTransport(backend),
    )


@pytest.fixture
def client(api_service):
    """
    Provides a TestClient whose routes use the fake-backed ApiService

    Scope: function (dependency overrides are removed after each test)
    """
    app.dependency_overrides[get_api_service] = lambda: api_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_session(token_store):
    token_store.set("admin-token", dict(ADMIN_USER))
    return token_store


@pytest.fixture
def customer_session(token_store):
    token_store.set("customer-token", json.loads(json.dumps(CUSTOMER_USER)))
    return token_store


@pytest.fixture
def sample_product_data():
    """
    Provides sample product form data for tests
    """
    return {
        "product_number": "PRD-0042",
        "common_name": "Jasmine",
        "botanical_name": "Jasminum grandiflorum",
        "plant_part": "Flower",
        "source_country": "India",
        "harvest_region_new": ["Tamil Nadu", "Karnataka"],
        "peak_season_enabled": True,
        "peak_season_months": ["July", "August"],
        "harvest_season_enabled": False,
        "harvest_season_months": ["January"],
        "status": "active",
    }
