"""Reranker endpoint load test.

Usage: rerank_test.py [REQUESTS] [CONCURRENT]

If you're getting 403 errors the domain may be behind Cloudflare protection;
point --endpoint at the platform's internal URL instead.
"""
import sys

from src.loadtest.cli import main
from src.loadtest.models import Mode


if __name__ == "__main__":
    sys.exit(main(Mode.RERANK))
