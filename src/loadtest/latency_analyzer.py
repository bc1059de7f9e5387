"""Analyzes and computes latency, throughput and score statistics."""
import logging
from typing import List, Optional, Sequence
import numpy as np

from .models import (
    CategoryStats, LatencyResults, Mode, Report, RequestResult, RequestSpec, ScoreStats
)


# Configure logging
logger = logging.getLogger(__name__)


class LatencyAnalyzer:
    """Analyzes and computes latency, throughput and score statistics."""

    @staticmethod
    def compute_latencies(latencies: Sequence[float]) -> Optional[LatencyResults]:
        """
        Compute average, median, min, max, p90 and p95.

        Args:
            latencies: List of latency measurements in seconds.

        Returns:
            LatencyResults, or None for an empty sample.
        """
        if not latencies:
            return None

        values = np.asarray(latencies, dtype=float)
        return LatencyResults(
            average=float(np.mean(values)),
            median=float(np.median(values)),
            minimum=float(np.min(values)),
            maximum=float(np.max(values)),
            p90=float(np.percentile(values, 90)),
            p95=float(np.percentile(values, 95))
        )

    @staticmethod
    def compute_category_stats(successes: Sequence[RequestResult], specs: Sequence[RequestSpec]) -> List[CategoryStats]:
        """Per-category latency breakdown in request pool order; empty categories are left out."""
        known = {spec.category for spec in specs}
        unknown = sorted({r.category for r in successes if r.category not in known})
        if unknown:
            logger.warning(f"Results with categories outside the request pool are left out of the breakdown: {', '.join(unknown)}")

        breakdown = []
        for spec in specs:
            matching = [r for r in successes if r.category == spec.category]
            if not matching:
                continue
            durations = np.asarray([r.duration_seconds for r in matching], dtype=float)
            breakdown.append(CategoryStats(
                category=spec.category,
                count=len(matching),
                average=float(np.mean(durations)),
                minimum=float(np.min(durations)),
                maximum=float(np.max(durations)),
                token_count=matching[0].token_count,
                query_token_count=matching[0].query_token_count,
            ))
        return breakdown

    @staticmethod
    def compute_score_stats(successes: Sequence[RequestResult]) -> Optional[ScoreStats]:
        """Statistics over successful results that carry a top score."""
        scores = [r.top_score for r in successes if r.top_score is not None]
        if not scores:
            return None
        values = np.asarray(scores, dtype=float)
        return ScoreStats(
            count=len(scores),
            average=float(np.mean(values)),
            minimum=float(np.min(values)),
            maximum=float(np.max(values)),
        )

    @classmethod
    def build_report(
        cls,
        results: Sequence[RequestResult],
        specs: Sequence[RequestSpec],
        mode: Mode,
        total_duration: float,
        peak_in_flight: int = 0,
    ) -> Report:
        """
        Aggregate a completed run into a Report.

        Latency, category and score sections are computed over successful
        requests only and stay empty when nothing succeeded.
        """
        successes = [r for r in results if r.succeeded]
        total = len(results)
        success_count = len(successes)
        total_tokens = sum(r.token_count for r in successes)

        report = Report(
            mode=mode,
            total_requests=total,
            successful=success_count,
            failed=total - success_count,
            # Truncated, not rounded, to one decimal
            success_rate=(success_count * 1000 // total) / 10 if total else 0.0,
            total_duration=total_duration,
            requests_per_second=success_count / total_duration if total_duration > 0 else 0.0,
            total_tokens=total_tokens,
            tokens_per_second=total_tokens / total_duration if total_duration > 0 else 0.0,
            peak_in_flight=peak_in_flight,
        )

        if not successes:
            logger.warning("No successful requests; skipping latency statistics")
            return report

        report.latency = cls.compute_latencies([r.duration_seconds for r in successes])
        report.categories = cls.compute_category_stats(successes, specs)
        if mode == Mode.RERANK:
            report.scores = cls.compute_score_stats(successes)
        return report
