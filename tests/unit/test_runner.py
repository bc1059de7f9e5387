"""Unit tests for the load test runner."""

from unittest.mock import patch

import pytest

from src.loadtest.exceptions import InvalidRunParametersError
from src.loadtest.models import Mode
from src.loadtest.runner import LoadTestRunner, summary_path_for
from src.shared.config import Config
from tests.fakes import FakeRequestExecutor
from tests.test_const import SCENARIO_LATENCIES, TEST_ENDPOINT, TEST_RERANK_ENDPOINT


class TestLoadTestRunner:
    """Test end-to-end runs against a fake executor."""

    def test_scenario_all_successful(self, capsys):
        """Five sequential successes produce the expected report and output."""
        executor = FakeRequestExecutor(duration_for=lambda request_id: SCENARIO_LATENCIES[request_id - 1])
        runner = LoadTestRunner(Config(), Mode.EMBEDDINGS, request_executor=executor)

        report = runner.run(TEST_ENDPOINT, request_count=5, concurrency=1)

        assert report.successful == 5
        assert report.failed == 0
        assert report.latency.average == pytest.approx(0.3)
        assert report.latency.median == pytest.approx(0.3)
        assert report.latency.minimum == pytest.approx(0.1)
        assert report.latency.maximum == pytest.approx(0.5)
        assert report.peak_in_flight == 1
        out = capsys.readouterr().out
        assert "Progress: ✓✓✓✓✓" in out
        assert "Successful: 5" in out
        assert "Average Response Time: 0.300 seconds" in out

    def test_partial_failures(self, capsys):
        """Two 500s out of four give 50% without aborting the run."""
        executor = FakeRequestExecutor(status_for=lambda request_id: 500 if request_id in (2, 4) else 200)
        runner = LoadTestRunner(Config(), Mode.EMBEDDINGS, request_executor=executor)

        report = runner.run(TEST_ENDPOINT, request_count=4, concurrency=1)

        assert report.successful == 2
        assert report.failed == 2
        assert report.success_rate == pytest.approx(50.0)
        assert "Progress: ✓✗✓✗" in capsys.readouterr().out

    def test_all_failed_still_reports(self, capsys):
        """A run without successes prints the report shell."""
        executor = FakeRequestExecutor(status_for=lambda request_id: 0)
        runner = LoadTestRunner(Config(), Mode.RERANK, request_executor=executor)

        report = runner.run(TEST_RERANK_ENDPOINT, request_count=3, concurrency=2)

        assert report.successful == 0
        out = capsys.readouterr().out
        assert "Successful: 0" in out
        assert "Failed: 3" in out
        assert "Reranking Score Statistics" not in out

    def test_results_match_request_count(self, capsys):
        """Exactly one result per request id is kept on the runner."""
        runner = LoadTestRunner(Config(), Mode.EMBEDDINGS, request_executor=FakeRequestExecutor(delay=0.001))

        report = runner.run(TEST_ENDPOINT, request_count=23, concurrency=4)

        assert sorted(r.request_id for r in runner.results) == list(range(1, 24))
        assert report.successful + report.failed == 23
        assert report.peak_in_flight <= 4

    def test_defaults_from_profile_and_config(self, capsys):
        """Omitted arguments fall back to the mode defaults and configured endpoint."""
        executor = FakeRequestExecutor()
        config = Config(rerank_endpoint=TEST_RERANK_ENDPOINT)
        runner = LoadTestRunner(config, Mode.RERANK, request_executor=executor)

        report = runner.run()

        assert report.total_requests == 50
        assert f"Endpoint: {TEST_RERANK_ENDPOINT}" in capsys.readouterr().out

    @pytest.mark.parametrize("request_count,concurrency", [(0, 1), (5, 0), (-1, 3)])
    def test_rejects_non_positive_parameters(self, request_count, concurrency):
        """Request count and concurrency must both be at least 1."""
        runner = LoadTestRunner(Config(), Mode.EMBEDDINGS, request_executor=FakeRequestExecutor())

        with pytest.raises(InvalidRunParametersError):
            runner.run(TEST_ENDPOINT, request_count=request_count, concurrency=concurrency)

    def test_embeddings_executor_sends_user_agent(self):
        """Embedding requests carry the configured User-Agent; rerank requests do not."""
        embed_runner = LoadTestRunner(Config(user_agent="Bench/2.0"), Mode.EMBEDDINGS)
        rerank_runner = LoadTestRunner(Config(), Mode.RERANK)

        assert embed_runner.request_executor.headers["User-Agent"] == "Bench/2.0"
        assert "User-Agent" not in rerank_runner.request_executor.headers

    def test_model_override(self):
        """An explicit model replaces the configured one."""
        runner = LoadTestRunner(Config(), Mode.EMBEDDINGS, model="other-model")

        assert runner.request_executor.model == "other-model"

    @patch('src.loadtest.runner.VisualizationGenerator')
    @patch('src.loadtest.runner.ResultExporter')
    def test_exports_when_paths_given(self, mock_exporter, mock_visualizer, tmp_path, capsys):
        """Results, summary and chart are written when requested."""
        runner = LoadTestRunner(Config(), Mode.EMBEDDINGS, request_executor=FakeRequestExecutor())
        output = tmp_path / "results.csv"
        plot = tmp_path / "latency.png"

        runner.run(TEST_ENDPOINT, request_count=3, concurrency=1, output_path=output, plot_path=plot)

        mock_exporter.save_results.assert_called_once_with(runner.results, output)
        mock_exporter.save_summary.assert_called_once()
        assert mock_exporter.save_summary.call_args.args[1] == tmp_path / "results_summary.csv"
        mock_visualizer.return_value.plot_results.assert_called_once_with(runner.results, runner.specs, plot)

    def test_summary_path_for(self):
        """Summary file sits next to the results file."""
        assert summary_path_for("out/run.csv").as_posix() == "out/run_summary.csv"
