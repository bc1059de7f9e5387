"""Load test package initialization."""
from .models import (
    Mode, RequestSpec, RequestResult, RunParameters, LatencyResults,
    CategoryStats, ScoreStats, Report
)
from .constants import LoadTestConstants, ModeProfile
from .exceptions import (
    LoadTestError, InvalidRunParametersError, RequestError,
    InvalidResponseFormatError, ResultLoadError
)
from .request_session_manager import RequestSessionManager
from .dataset_manager import DatasetManager
from .request_executor import RequestExecutor
from .latency_analyzer import LatencyAnalyzer
from .concurrency_manager import ConcurrencyManager
from .report_printer import ReportPrinter
from .result_exporter import ResultExporter
from .visualization_generator import VisualizationGenerator
from .runner import LoadTestRunner, run_load_test

__all__ = [
    'Mode',
    'RequestSpec',
    'RequestResult',
    'RunParameters',
    'LatencyResults',
    'CategoryStats',
    'ScoreStats',
    'Report',
    'LoadTestConstants',
    'ModeProfile',
    'LoadTestError',
    'InvalidRunParametersError',
    'RequestError',
    'InvalidResponseFormatError',
    'ResultLoadError',
    'RequestSessionManager',
    'DatasetManager',
    'RequestExecutor',
    'LatencyAnalyzer',
    'ConcurrencyManager',
    'ReportPrinter',
    'ResultExporter',
    'VisualizationGenerator',
    'LoadTestRunner',
    'run_load_test'
]
