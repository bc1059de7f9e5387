"""Unit tests for HTTP session creation."""

import requests

from src.loadtest.request_session_manager import RequestSessionManager


class TestRequestSessionManager:
    """Test session configuration."""

    def test_session_has_no_retries(self):
        """Mounted adapters never retry a request."""
        session = RequestSessionManager.create_session(4)

        for prefix in ("http://", "https://"):
            adapter = session.get_adapter(prefix + "example.com")
            assert adapter.max_retries.total == 0
        session.close()

    def test_session_pool_size(self):
        """Connection pool is sized to the concurrency ceiling."""
        session = RequestSessionManager.create_session(7)

        adapter = session.get_adapter("https://example.com")
        assert isinstance(session, requests.Session)
        assert adapter._pool_maxsize == 7
        session.close()
