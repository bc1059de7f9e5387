"""Manages the fixed request pools used by the load tests."""
import logging
from typing import Sequence, Tuple

from .constants import EMBEDDING_TEXTS, RERANK_DOCUMENTS, RERANK_QUERIES
from .models import Mode, RequestSpec


# Configure logging
logger = logging.getLogger(__name__)


class DatasetManager:
    """Manages the fixed request pools used by the load tests."""

    @staticmethod
    def prepare_specs(mode: Mode) -> Tuple[RequestSpec, ...]:
        """
        Build the ordered request pool for a mode.

        Args:
            mode: Endpoint kind under test.

        Returns:
            Tuple of request specs in category order.
        """
        if mode == Mode.EMBEDDINGS:
            specs = tuple(RequestSpec(category=label, text=text) for label, text in EMBEDDING_TEXTS)
        else:
            specs = tuple(
                RequestSpec(category=label, query=query, documents=RERANK_DOCUMENTS)
                for label, query in RERANK_QUERIES
            )

        logger.debug(f"Prepared {len(specs)} {mode.value} request specs.")
        return specs

    @staticmethod
    def spec_for_request(specs: Sequence[RequestSpec], request_id: int) -> RequestSpec:
        """Return the spec for a 1-based request id, cycling through the pool."""
        return specs[(request_id - 1) % len(specs)]
