"""Shared test configuration and fixtures for all tests."""

import pytest

from src.loadtest.models import RequestResult
from tests.fakes import FakeRequestExecutor


@pytest.fixture
def fake_executor():
    """Fake request executor that answers 200 immediately."""
    return FakeRequestExecutor()


@pytest.fixture
def make_result():
    """Factory for RequestResult instances with sensible defaults."""
    def _make(request_id=1, http_status=200, duration_seconds=0.1, category="Short (1 word)",
              token_count=1, query_token_count=1, top_score=None):
        return RequestResult(
            request_id=request_id,
            http_status=http_status,
            duration_seconds=duration_seconds,
            category=category,
            token_count=token_count,
            query_token_count=query_token_count,
            top_score=top_score,
        )
    return _make
