"""Handles exporting load test results to CSV."""
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union
import pandas as pd

from .exceptions import ResultLoadError
from .models import Report, RequestResult


# Configure logging
logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    'request_id', 'http_status', 'duration_seconds', 'category',
    'token_count', 'query_token_count', 'top_score'
]


class ResultExporter:
    """Handles exporting load test results to CSV."""

    @staticmethod
    def save_results(results: Sequence[RequestResult], output_path: Union[Path, str]) -> None:
        """
        Save per-request results to CSV, ordered by request id.

        Args:
            results: Completed request results.
            output_path: Path to save CSV.
        """
        if not results:
            logger.warning("No results available for saving")
            return

        df = pd.DataFrame([asdict(r) for r in results], columns=RESULT_COLUMNS)
        df = df.sort_values(by='request_id')
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)
        logger.info(f"Results saved to CSV: {output_path}")

    @staticmethod
    def load_results(input_path: Union[Path, str]) -> List[RequestResult]:
        """
        Load per-request results previously written by save_results.

        Raises:
            ResultLoadError: If the file is missing or lacks expected columns.
        """
        try:
            df = pd.read_csv(input_path)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise ResultLoadError(f"Unable to read results from {input_path}") from e

        missing = [c for c in RESULT_COLUMNS if c not in df.columns]
        if missing:
            raise ResultLoadError(f"Results file {input_path} is missing columns: {', '.join(missing)}")

        results = []
        for _, row in df.iterrows():
            top_score = row['top_score']
            results.append(RequestResult(
                request_id=int(row['request_id']),
                http_status=int(row['http_status']),
                duration_seconds=float(row['duration_seconds']),
                category=str(row['category']),
                token_count=int(row['token_count']),
                query_token_count=int(row['query_token_count']),
                top_score=None if pd.isna(top_score) else float(top_score),
            ))

        logger.info(f"Loaded {len(results)} results from CSV: {input_path}")
        return results

    @staticmethod
    def save_summary(report: Report, output_path: Union[Path, str]) -> None:
        """Save the headline figures of a report as a one-row CSV."""
        summary = {
            'mode': report.mode.value,
            'total_requests': report.total_requests,
            'successful': report.successful,
            'failed': report.failed,
            'success_rate': report.success_rate,
            'total_duration': report.total_duration,
            'requests_per_second': report.requests_per_second,
            'total_tokens': report.total_tokens,
            'tokens_per_second': report.tokens_per_second,
            'peak_in_flight': report.peak_in_flight,
        }
        if report.latency is not None:
            summary.update({f'latency_{k}': v for k, v in asdict(report.latency).items()})
        if report.scores is not None:
            summary.update({f'score_{k}': v for k, v in asdict(report.scores).items()})

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        pd.DataFrame([summary]).to_csv(output_path, index=False)
        logger.info(f"Summary saved to CSV: {output_path}")

    @staticmethod
    def load_summary(input_path: Union[Path, str]) -> Dict[str, Any]:
        """
        Load the summary row written by save_summary.

        Raises:
            ResultLoadError: If the file cannot be read or is empty.
        """
        try:
            df = pd.read_csv(input_path)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise ResultLoadError(f"Unable to read summary from {input_path}") from e
        if df.empty:
            raise ResultLoadError(f"Summary file {input_path} has no rows")
        return df.iloc[0].to_dict()
