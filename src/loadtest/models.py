"""Data models for the load testing system."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from src.const import HTTP_SUCCESS


class Mode(str, Enum):
    """Endpoint kind under test; selects the request pool and payload shape."""
    EMBEDDINGS = "embeddings"
    RERANK = "rerank"


def count_words(text: str) -> int:
    """Count whitespace separated words."""
    return len(text.split())


@dataclass(frozen=True)
class RequestSpec:
    """One canned test case, labelled with the category it is reported under."""
    category: str
    text: Optional[str] = None
    query: Optional[str] = None
    documents: Tuple[str, ...] = ()

    @property
    def query_token_count(self) -> int:
        if self.query is not None:
            return count_words(self.query)
        return count_words(self.text or "")

    @property
    def token_count(self) -> int:
        return self.query_token_count + sum(count_words(doc) for doc in self.documents)


@dataclass(frozen=True)
class RequestResult:
    """Outcome of one dispatched request."""
    request_id: int
    http_status: int
    duration_seconds: float
    category: str
    token_count: int
    query_token_count: int
    top_score: Optional[float] = None

    @property
    def succeeded(self) -> bool:
        return self.http_status == HTTP_SUCCESS


@dataclass
class RunParameters:
    """Inputs of a single load test run."""
    endpoint: str
    request_count: int
    concurrency: int
    mode: Mode
    model: str


@dataclass
class LatencyResults:
    """Latency statistics in seconds."""
    average: float
    median: float
    minimum: float
    maximum: float
    p90: float
    p95: float


@dataclass
class CategoryStats:
    """Latency and token figures for one request category."""
    category: str
    count: int
    average: float
    minimum: float
    maximum: float
    token_count: int
    query_token_count: int


@dataclass
class ScoreStats:
    """Statistics over the top rerank scores that could be parsed."""
    count: int
    average: float
    minimum: float
    maximum: float


@dataclass
class Report:
    """Aggregate statistics of a completed run."""
    mode: Mode
    total_requests: int
    successful: int
    failed: int
    success_rate: float
    total_duration: float
    requests_per_second: float
    total_tokens: int = 0
    tokens_per_second: float = 0.0
    peak_in_flight: int = 0
    latency: Optional[LatencyResults] = None
    categories: List[CategoryStats] = field(default_factory=list)
    scores: Optional[ScoreStats] = None
