"""Manages HTTP request sessions for the load tests."""
import logging
import requests
from requests.adapters import HTTPAdapter


# Configure logging
logger = logging.getLogger(__name__)


class RequestSessionManager:
    """Manages HTTP request sessions for the load tests."""

    @staticmethod
    def create_session(pool_size: int = 10) -> requests.Session:
        """
        Create a requests session without retries.

        Every request is attempted exactly once; the connection pool is
        sized so concurrent workers never wait on a free connection.

        Args:
            pool_size: Number of connections kept per host.
        """
        session = requests.Session()
        adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size, max_retries=0)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        logger.debug(f"Created HTTP session with pool size {pool_size}")
        return session
