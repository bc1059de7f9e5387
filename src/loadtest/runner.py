"""Load test runner to orchestrate a single run against one endpoint."""
import logging
import time
from pathlib import Path
from typing import List, Optional, Union

from src.const import USER_AGENT_HEADER
from src.shared.config import Config
from .concurrency_manager import ConcurrencyManager
from .constants import LoadTestConstants
from .dataset_manager import DatasetManager
from .exceptions import InvalidRunParametersError
from .latency_analyzer import LatencyAnalyzer
from .models import Mode, Report, RequestResult, RunParameters
from .report_printer import ReportPrinter
from .request_executor import RequestExecutor
from .request_session_manager import RequestSessionManager
from .result_exporter import ResultExporter
from .visualization_generator import VisualizationGenerator


logger = logging.getLogger(__name__)


class LoadTestRunner:
    """Orchestrates one load test run and prints its report."""

    def __init__(self, config: Config, mode: Mode, model: Optional[str] = None, request_executor: Optional[RequestExecutor] = None):
        self.config = config
        self.mode = mode
        self.profile = LoadTestConstants.profile_for(mode)
        self.model = model or (config.rerank_model if mode == Mode.RERANK else config.embeddings_model)
        self.specs = DatasetManager.prepare_specs(mode)
        self.request_executor = request_executor or RequestExecutor(
            mode, self.model, timeout=config.request_timeout, headers=self._mode_headers()
        )
        self.concurrency_manager = ConcurrencyManager(self.request_executor)
        self.printer = ReportPrinter(self.profile)
        self.results: List[RequestResult] = []

    def _mode_headers(self):
        headers = dict(self.profile.extra_headers)
        if USER_AGENT_HEADER in headers:
            headers[USER_AGENT_HEADER] = self.config.user_agent
        return headers

    def default_endpoint(self) -> str:
        return self.config.rerank_endpoint if self.mode == Mode.RERANK else self.config.embeddings_endpoint

    def run(
        self,
        endpoint: Optional[str] = None,
        request_count: Optional[int] = None,
        concurrency: Optional[int] = None,
        output_path: Optional[Union[Path, str]] = None,
        plot_path: Optional[Union[Path, str]] = None,
    ) -> Report:
        """
        Run the load test and print the report.

        Individual request failures are counted in the report and never
        abort the run.

        Raises:
            InvalidRunParametersError: If request_count or concurrency is below 1.
        """
        params = RunParameters(
            endpoint=endpoint or self.default_endpoint(),
            request_count=self.profile.default_requests if request_count is None else request_count,
            concurrency=self.profile.default_concurrency if concurrency is None else concurrency,
            mode=self.mode,
            model=self.model,
        )
        if params.request_count < 1:
            raise InvalidRunParametersError(f"Request count must be at least 1, got {params.request_count}")
        if params.concurrency < 1:
            raise InvalidRunParametersError(f"Concurrency must be at least 1, got {params.concurrency}")

        print(self.printer.format_header(params, self.specs))
        logger.info(f"Sending {params.request_count} {self.mode.value} requests to {params.endpoint} "
                    f"with concurrency {params.concurrency}")
        print(self.printer.format_progress_prefix(), end="", flush=True)

        session = RequestSessionManager.create_session(params.concurrency)
        start_time = time.perf_counter()
        try:
            self.results = self.concurrency_manager.run_requests(
                session, params.endpoint, self.specs, params.request_count, params.concurrency,
                on_result=self._print_progress,
            )
        finally:
            session.close()
        total_duration = time.perf_counter() - start_time

        report = LatencyAnalyzer.build_report(
            self.results, self.specs, self.mode, total_duration,
            peak_in_flight=self.concurrency_manager.peak_in_flight,
        )
        print(self.printer.format_report(report))
        logger.info(f"Run finished: {report.successful}/{report.total_requests} successful")

        if output_path is not None:
            ResultExporter.save_results(self.results, output_path)
            ResultExporter.save_summary(report, summary_path_for(output_path))
        if plot_path is not None:
            VisualizationGenerator(self.profile.title).plot_results(self.results, self.specs, plot_path)

        return report

    def _print_progress(self, result: RequestResult) -> None:
        print(self.printer.glyph(result), end="", flush=True)


def summary_path_for(output_path: Union[Path, str]) -> Path:
    """Path of the summary CSV written next to an exported results CSV."""
    path = Path(output_path)
    return path.with_name(f"{path.stem}_summary.csv")


def run_load_test(endpoint: str, request_count: int, concurrency: int, mode: Mode, config: Optional[Config] = None) -> Report:
    """Run one load test against `endpoint` and return its report."""
    runner = LoadTestRunner(config or Config(), mode)
    return runner.run(endpoint, request_count, concurrency)
