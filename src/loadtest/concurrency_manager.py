"""Manages concurrent request execution."""
import logging
import threading
import concurrent.futures
from typing import Callable, List, Optional, Sequence
import requests

from src.const import HTTP_TRANSPORT_FAILURE
from .dataset_manager import DatasetManager
from .models import RequestResult, RequestSpec
from .request_executor import RequestExecutor


# Configure logging
logger = logging.getLogger(__name__)


class ConcurrencyManager:
    """Manages concurrent request execution."""

    def __init__(self, request_executor: RequestExecutor):
        self.request_executor = request_executor
        self.peak_in_flight = 0
        self._in_flight = 0
        self._lock = threading.Lock()

    def run_requests(
        self,
        session: requests.Session,
        url: str,
        specs: Sequence[RequestSpec],
        request_count: int,
        concurrency: int,
        on_result: Optional[Callable[[RequestResult], None]] = None,
    ) -> List[RequestResult]:
        """
        Dispatch request ids 1..request_count with at most `concurrency` in flight.

        Ids are admitted in increasing order; each admission waits on a
        semaphore slot that is released when the request completes.

        Args:
            session: Requests session.
            url: Endpoint URL.
            specs: Ordered request pool, cycled round-robin.
            request_count: Number of requests to send.
            concurrency: Maximum number of requests in flight.
            on_result: Called once per completed request, under the results lock.

        Returns:
            One RequestResult per request id, in completion order.
        """
        results: List[RequestResult] = []
        gate = threading.BoundedSemaphore(concurrency)
        self.peak_in_flight = 0
        self._in_flight = 0

        def execute(request_id: int, spec: RequestSpec) -> None:
            try:
                result = self.request_executor.send_request(session, url, spec, request_id)
            except Exception as e:
                logger.error(f"Error in request {request_id}: {e}")
                result = RequestResult(
                    request_id=request_id,
                    http_status=HTTP_TRANSPORT_FAILURE,
                    duration_seconds=0.0,
                    category=spec.category,
                    token_count=spec.token_count,
                    query_token_count=spec.query_token_count,
                )
            try:
                with self._lock:
                    results.append(result)
                    self._in_flight -= 1
                    if on_result is not None:
                        on_result(result)
            finally:
                gate.release()

        with concurrent.futures.ThreadPoolExecutor(max_workers=concurrency) as executor:
            for request_id in range(1, request_count + 1):
                gate.acquire()
                with self._lock:
                    self._in_flight += 1
                    self.peak_in_flight = max(self.peak_in_flight, self._in_flight)
                spec = DatasetManager.spec_for_request(specs, request_id)
                executor.submit(execute, request_id, spec)

        return results
