"""Fixtures for AWS client tests.

Provides a factory-as-fixture for configurable fake boto3 clients. Tests
monkeypatch `infrastructure.clients.aws.executor.get_boto3_client` to return
them.
"""

from typing import Any, Dict, List, Optional

import pytest

from infrastructure.clients.aws.dynamodb import DynamoDBClient
from infrastructure.clients.aws.session_provider import SessionProvider


class FakePaginator:
    """Fake boto3 paginator that yields provided pages."""

    def __init__(self, pages):
        self._pages = list(pages)
        self.calls: List[Dict[str, Any]] = []

    def paginate(self, **kwargs):
        self.calls.append(kwargs)
        yield from self._pages


class FakeClient:
    """Configurable fake boto3 client.

    API methods are looked up in ``api_responses``; a callable response is
    called with the method's keyword arguments, anything else is returned
    as is.
    """

    def __init__(
        self,
        paginated_pages: Optional[List[Dict[str, Any]]] = None,
        api_responses: Optional[Dict[str, Any]] = None,
    ):
        self.paginator = FakePaginator(paginated_pages or [])
        self._api_responses = api_responses or {}

    def get_paginator(self, method_name: str) -> FakePaginator:
        return self.paginator

    def __getattr__(self, name: str):
        if name.startswith("_") or name not in self._api_responses:
            raise AttributeError(name)
        response = self._api_responses[name]

        def _call(**kwargs):
            return response(**kwargs) if callable(response) else response

        return _call


@pytest.fixture
def make_fake_client():
    """Factory fixture for creating FakeClient instances.

    Usage:
        def test_something(monkeypatch, make_fake_client):
            client = make_fake_client(api_responses={"get_item": {"Item": {...}}})
            monkeypatch.setattr(executor, "get_boto3_client", lambda *a, **k: client)
    """

    def _factory(
        paginated_pages: Optional[List[Dict[str, Any]]] = None,
        api_responses: Optional[Dict[str, Any]] = None,
    ) -> FakeClient:
        return FakeClient(paginated_pages=paginated_pages, api_responses=api_responses)

    return _factory


@pytest.fixture
def dynamodb_client():
    """DynamoDBClient with a region-only SessionProvider."""
    return DynamoDBClient(SessionProvider(region="ca-central-1"), max_retries=1)
