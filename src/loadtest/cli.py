"""Command line entry points for the embedding and rerank load tests."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.shared.config import Config
from src.shared.logging import LoggingManager
from .constants import LoadTestConstants
from .dataset_manager import DatasetManager
from .exceptions import ResultLoadError
from .latency_analyzer import LatencyAnalyzer
from .models import Mode
from .report_printer import ReportPrinter
from .result_exporter import ResultExporter
from .runner import LoadTestRunner, summary_path_for
from .visualization_generator import VisualizationGenerator


logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value} must be at least 1")
    return number


def build_parser(mode: Mode, prog: Optional[str] = None) -> argparse.ArgumentParser:
    profile = LoadTestConstants.profile_for(mode)
    parser = argparse.ArgumentParser(prog=prog, description=profile.title)
    parser.add_argument("requests", nargs="?", type=positive_int, default=profile.default_requests,
                        help=f"Number of requests to send (default {profile.default_requests})")
    parser.add_argument("concurrent", nargs="?", type=positive_int, default=profile.default_concurrency,
                        help=f"Maximum requests in flight (default {profile.default_concurrency})")
    parser.add_argument("--endpoint", default=None, help="Endpoint URL (defaults to the configured one)")
    parser.add_argument("--model", default=None, help="Model id sent in every request")
    parser.add_argument("--output", type=Path, default=None, help="CSV file to write per-request results")
    parser.add_argument("--plot", type=Path, default=None, help="PNG file to write a latency chart")
    parser.add_argument("--log-level", default=None, help="Logging level (default from config)")
    return parser


def main(mode: Mode, argv: Optional[List[str]] = None, prog: Optional[str] = None) -> int:
    """Run one load test from command line arguments. Returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    prog = prog or Path(sys.argv[0]).name
    args = build_parser(mode, prog).parse_args(argv)

    config = Config()
    LoggingManager.setup_logging(args.log_level or config.log_level)

    runner = LoadTestRunner(config, mode, model=args.model)
    runner.run(
        endpoint=args.endpoint,
        request_count=args.requests,
        concurrency=args.concurrent,
        output_path=args.output,
        plot_path=args.plot,
    )

    if not argv:
        print(runner.printer.format_usage(prog))
    return 0


def embed_main() -> int:
    return main(Mode.EMBEDDINGS)


def rerank_main() -> int:
    return main(Mode.RERANK)


def replay_main(argv: Optional[List[str]] = None) -> int:
    """Rebuild the report and chart from an exported results CSV without sending requests."""
    parser = argparse.ArgumentParser(description="Print statistics for exported load test results.")
    parser.add_argument("results", type=Path, help="CSV written with --output")
    parser.add_argument("--mode", choices=[m.value for m in Mode], default=None,
                        help="Mode of the exported run (default: read from the summary file)")
    parser.add_argument("--plot", type=Path, default=None, help="PNG file to write a latency chart")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    LoggingManager.setup_logging(args.log_level)

    try:
        results = ResultExporter.load_results(args.results)
    except ResultLoadError as e:
        logger.error(str(e))
        return 1

    summary = {}
    summary_path = summary_path_for(args.results)
    if summary_path.exists():
        try:
            summary = ResultExporter.load_summary(summary_path)
        except ResultLoadError as e:
            logger.warning(str(e))
    else:
        logger.warning(f"Summary file {summary_path} not found; throughput will read as zero")
    total_duration = float(summary.get('total_duration', 0.0))

    if args.mode is not None:
        mode = Mode(args.mode)
    elif summary.get('mode') in {m.value for m in Mode}:
        mode = Mode(summary['mode'])
    else:
        mode = Mode.EMBEDDINGS
        logger.warning(f"Mode not given and not found in {summary_path}; assuming {mode.value}")
    specs = DatasetManager.prepare_specs(mode)
    profile = LoadTestConstants.profile_for(mode)

    report = LatencyAnalyzer.build_report(results, specs, mode, total_duration)
    print(ReportPrinter(profile).format_report(report))

    if args.plot is not None:
        VisualizationGenerator(profile.title).plot_results(results, specs, args.plot)
    return 0
