"""Handles individual request execution and timing."""
import time
import logging
from typing import Any, Dict, Optional
import requests

from src.const import (
    CONTENT_TYPE_HEADER, CONTENT_TYPE_JSON, DOCUMENTS_FIELD, HTTP_SUCCESS,
    HTTP_TRANSPORT_FAILURE, INPUT_FIELD, MODEL_FIELD, QUERY_FIELD, SCORE_FIELD
)
from .exceptions import InvalidResponseFormatError, RequestError
from .models import Mode, RequestResult, RequestSpec


# Configure logging
logger = logging.getLogger(__name__)


class RequestExecutor:
    """Handles individual request execution and timing."""

    def __init__(self, mode: Mode, model: str, timeout: Optional[float] = None, headers: Optional[Dict[str, str]] = None):
        self.mode = mode
        self.model = model
        self.timeout = timeout
        self.headers = {CONTENT_TYPE_HEADER: CONTENT_TYPE_JSON}
        if headers:
            self.headers.update(headers)

    def build_payload(self, spec: RequestSpec) -> Dict[str, Any]:
        """Build the JSON body for a request spec."""
        if self.mode == Mode.RERANK:
            return {
                MODEL_FIELD: self.model,
                QUERY_FIELD: spec.query,
                DOCUMENTS_FIELD: list(spec.documents),
            }
        return {MODEL_FIELD: self.model, INPUT_FIELD: spec.text}

    def send_request(self, session: requests.Session, url: str, spec: RequestSpec, request_id: int) -> RequestResult:
        """
        Send a single request and measure its latency.

        A non-200 answer or a transport error is recorded as a failed result
        rather than raised; the request is never retried.

        Args:
            session: Requests session without retries.
            url: Endpoint URL.
            spec: Request spec to send.
            request_id: 1-based sequence number of the request.

        Returns:
            RequestResult for this request.
        """
        payload = self.build_payload(spec)
        top_score = None

        start_time = time.perf_counter()
        try:
            response = self._post(session, url, payload)
            status = response.status_code
        except RequestError as e:
            logger.debug(f"Request {request_id} failed: {e.__cause__}")
            status = HTTP_TRANSPORT_FAILURE
            response = None
        end_time = time.perf_counter()

        if status == HTTP_SUCCESS and self.mode == Mode.RERANK:
            top_score = self.read_top_score(response)
        elif status != HTTP_SUCCESS and response is not None:
            logger.debug(f"Request {request_id} returned HTTP {status}")

        return RequestResult(
            request_id=request_id,
            http_status=status,
            duration_seconds=end_time - start_time,
            category=spec.category,
            token_count=spec.token_count,
            query_token_count=spec.query_token_count,
            top_score=top_score,
        )

    def _post(self, session: requests.Session, url: str, payload: Dict[str, Any]) -> requests.Response:
        try:
            return session.post(url, json=payload, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise RequestError(f"Request to {url} failed") from e

    @staticmethod
    def parse_top_score(body: Any) -> float:
        """
        Extract the score of the first entry of a rerank response body.

        Raises:
            InvalidResponseFormatError: If the body has no numeric score at [0].score.
        """
        if not isinstance(body, list) or not body:
            raise InvalidResponseFormatError("Rerank response is not a non-empty array")
        first = body[0]
        if not isinstance(first, dict):
            raise InvalidResponseFormatError("First rerank entry is not an object")
        score = first.get(SCORE_FIELD)
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise InvalidResponseFormatError(f"Missing or non-numeric '{SCORE_FIELD}' field")
        return float(score)

    def read_top_score(self, response: requests.Response) -> Optional[float]:
        """Return the top score of a rerank response, or None when it cannot be read."""
        try:
            return self.parse_top_score(response.json())
        except (ValueError, InvalidResponseFormatError) as e:
            logger.debug(f"Top score unavailable: {e}")
            return None
