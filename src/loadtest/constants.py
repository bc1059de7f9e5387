"""Constants for the load testing system."""
from dataclasses import dataclass, field
from typing import Dict, Tuple

from src.const import DEFAULT_USER_AGENT, USER_AGENT_HEADER
from .models import Mode


# Texts of increasing length sent to the embeddings endpoint, paired with their report labels
EMBEDDING_TEXTS: Tuple[Tuple[str, str], ...] = (
    ("Short (1 word)", "Query"),
    ("Medium (3 words)", "Machine learning embeddings"),
    ("Question (13 words)", "How do I implement text search using vector embeddings in my application?"),
    (
        "Paragraph (47 words)",
        "I need to build a recommendation system that can understand user preferences based on their "
        "browsing history and product descriptions. The system should be able to match users with relevant "
        "products by analyzing textual content like product titles, descriptions, and user reviews.",
    ),
    (
        "Long text (95 words)",
        "In the context of modern artificial intelligence and natural language processing applications, "
        "vector embeddings have become a fundamental component for representing textual data in "
        "high-dimensional spaces. These dense vector representations capture semantic relationships between "
        "words, phrases, and documents, enabling sophisticated search, recommendation, and classification "
        "systems. When implementing such systems in production environments, it's crucial to consider "
        "factors like embedding dimensionality, model selection, computational efficiency, and scalability "
        "to handle real-world data volumes and user loads.",
    ),
)

# Queries of increasing complexity sent to the rerank endpoint
RERANK_QUERIES: Tuple[Tuple[str, str], ...] = (
    ("Short query (2 words)", "machine learning"),
    ("Medium query (5 words)", "how to implement vector search"),
    ("Question (10 words)", "What are the best practices for building a recommendation system?"),
    (
        "Long query (15 words)",
        "I need to understand how neural networks process natural language and generate embeddings for "
        "semantic search applications",
    ),
    (
        "Complex query (75 words)",
        "In modern information retrieval systems, the combination of dense vector embeddings and sparse "
        "keyword matching has proven to be highly effective. When implementing such hybrid search systems, "
        "it's crucial to understand how to properly weight the contributions from each approach and how "
        "reranking models can significantly improve the final result quality by considering the full "
        "context of both the query and candidate documents",
    ),
)

# Every rerank request scores its query against this whole pool
RERANK_DOCUMENTS: Tuple[str, ...] = (
    "Machine learning is a subset of artificial intelligence",
    "Deep learning uses neural networks with multiple layers",
    "Vector databases store high-dimensional embeddings for similarity search",
    "Recommendation systems analyze user behavior to suggest relevant items",
    "Natural language processing enables computers to understand human language",
    "Embeddings are dense vector representations of text in high-dimensional space",
    "Semantic search goes beyond keyword matching to understand meaning and context",
    "Hybrid search combines traditional keyword search with vector similarity",
    "Reranking models improve search results by considering query-document interactions",
    "Information retrieval has evolved from simple text matching to sophisticated AI systems",
)


@dataclass(frozen=True)
class ModeProfile:
    """Presentation and default settings for one load test mode."""
    title: str
    category_heading: str
    lengths_heading: str
    default_requests: int
    default_concurrency: int
    usage_lines: Tuple[str, ...] = ()
    extra_headers: Dict[str, str] = field(default_factory=dict)


class LoadTestConstants:
    """Centralized constants for load test configuration."""
    DEFAULT_EMBEDDING_REQUESTS = 100
    DEFAULT_EMBEDDING_CONCURRENCY = 6
    DEFAULT_RERANK_REQUESTS = 50
    DEFAULT_RERANK_CONCURRENCY = 10

    EMBEDDINGS_PROFILE = ModeProfile(
        title="Simple Embedding Performance Test",
        category_heading="Performance by Text Length",
        lengths_heading="Text lengths being tested",
        default_requests=DEFAULT_EMBEDDING_REQUESTS,
        default_concurrency=DEFAULT_EMBEDDING_CONCURRENCY,
        usage_lines=(
            "This script tests 5 different text lengths:",
            "  • Single word queries",
            "  • Short phrases",
            "  • Questions",
            "  • Paragraphs",
            "  • Long documents",
        ),
        extra_headers={USER_AGENT_HEADER: DEFAULT_USER_AGENT},
    )
    RERANK_PROFILE = ModeProfile(
        title="Simple Reranker Performance Test",
        category_heading="Performance by Query Complexity",
        lengths_heading="Query complexity being tested",
        default_requests=DEFAULT_RERANK_REQUESTS,
        default_concurrency=DEFAULT_RERANK_CONCURRENCY,
        usage_lines=(
            "This script tests reranking with:",
            "  • 5 query complexity levels (2-75 words)",
            "  • 10 diverse documents per request",
            "  • Performance metrics by query type",
            "  • Reranking score analysis",
        ),
    )

    @classmethod
    def profile_for(cls, mode: Mode) -> ModeProfile:
        if mode == Mode.RERANK:
            return cls.RERANK_PROFILE
        return cls.EMBEDDINGS_PROFILE
