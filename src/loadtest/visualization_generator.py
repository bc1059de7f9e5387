"""Generates visualizations from load test results."""
import logging
from pathlib import Path
from typing import Sequence, Union
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from .models import RequestResult, RequestSpec


# Configure logging
logger = logging.getLogger(__name__)


class VisualizationGenerator:
    """Generates visualizations from load test results."""

    def __init__(self, title: str):
        self.title = title

    def plot_results(self, results: Sequence[RequestResult], specs: Sequence[RequestSpec], output_path: Union[Path, str]) -> bool:
        """
        Plot latency per category and latency by request id for successful requests.

        Args:
            results: Completed request results.
            specs: Request pool, used to order the categories.
            output_path: Path to save plot.

        Returns:
            True if a chart was written.
        """
        successes = [r for r in results if r.succeeded]
        if not successes:
            logger.warning("No successful requests to plot. Skipping chart.")
            return False

        df = pd.DataFrame({
            'request_id': [r.request_id for r in successes],
            'category': [r.category for r in successes],
            'latency_ms': [r.duration_seconds * 1000 for r in successes],
        }).sort_values(by='request_id')
        present = set(df['category'])
        order = [s.category for s in specs if s.category in present]

        fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 10))
        fig.suptitle(self.title, fontsize=14)

        sns.boxplot(data=df, x='category', y='latency_ms', order=order, ax=ax1)
        ax1.set_title('Latency by Category')
        ax1.set_xlabel('Category')
        ax1.set_ylabel('Latency (ms)')
        ax1.tick_params(axis='x', rotation=15)

        ax2.plot(df['request_id'], df['latency_ms'], marker='o', linestyle='-', linewidth=0.8, markersize=3)
        ax2.set_title('Latency by Request')
        ax2.set_xlabel('Request ID')
        ax2.set_ylabel('Latency (ms)')
        ax2.grid(True, alpha=0.3)

        plt.tight_layout()
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(output_path)
        plt.close(fig)
        logger.info(f"Graph saved: {output_path}")
        return True
