"""Constants for the embedding/rerank load tester."""

# Default endpoints and models
DEFAULT_EMBEDDINGS_ENDPOINT = "https://embed.fuzu.com/embeddings"
DEFAULT_EMBEDDINGS_MODEL = "janni-t/qwen3-embedding-0.6b-tei-onnx"
DEFAULT_RERANK_ENDPOINT = "https://rerank.fuzu.com/rerank"
DEFAULT_RERANK_MODEL = "BAAI/bge-reranker-base"
DEFAULT_USER_AGENT = "SimpleTest/1.0"

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "urllib3": "WARNING",
    "matplotlib": "WARNING",
    "PIL": "WARNING"
}

# HTTP status codes
HTTP_SUCCESS = 200
HTTP_TRANSPORT_FAILURE = 0

# HTTP headers
CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_TYPE_JSON = "application/json"
USER_AGENT_HEADER = "User-Agent"

# Request/Response field names
MODEL_FIELD = "model"
INPUT_FIELD = "input"
QUERY_FIELD = "query"
DOCUMENTS_FIELD = "documents"
SCORE_FIELD = "score"

# Progress glyphs
SUCCESS_GLYPH = "✓"
FAILURE_GLYPH = "✗"

# File names
CONFIG_FILE_NAME = "config.json"
