"""Unit tests for bounded concurrent dispatch."""

from unittest.mock import MagicMock

import pytest

from src.loadtest.concurrency_manager import ConcurrencyManager
from src.loadtest.dataset_manager import DatasetManager
from src.loadtest.models import Mode
from tests.fakes import FakeRequestExecutor
from tests.test_const import TEST_ENDPOINT


class TestConcurrencyManager:
    """Test dispatch, admission and result collection."""

    @pytest.mark.parametrize("request_count,concurrency", [(1, 1), (17, 3), (40, 10), (5, 20)])
    def test_one_result_per_request(self, request_count, concurrency):
        """Every id in 1..N produces exactly one result."""
        specs = DatasetManager.prepare_specs(Mode.EMBEDDINGS)
        manager = ConcurrencyManager(FakeRequestExecutor(delay=0.001))

        results = manager.run_requests(MagicMock(), TEST_ENDPOINT, specs, request_count, concurrency)

        ids = sorted(r.request_id for r in results)
        assert ids == list(range(1, request_count + 1))

    def test_in_flight_never_exceeds_limit(self):
        """No more than `concurrency` requests run at the same time."""
        specs = DatasetManager.prepare_specs(Mode.EMBEDDINGS)
        executor = FakeRequestExecutor(delay=0.01)
        manager = ConcurrencyManager(executor)

        manager.run_requests(MagicMock(), TEST_ENDPOINT, specs, 30, 3)

        assert executor.max_concurrent <= 3
        assert 1 <= manager.peak_in_flight <= 3

    def test_single_slot_runs_sequentially(self):
        """With a limit of one, requests never overlap."""
        specs = DatasetManager.prepare_specs(Mode.EMBEDDINGS)
        executor = FakeRequestExecutor(delay=0.002)
        manager = ConcurrencyManager(executor)

        manager.run_requests(MagicMock(), TEST_ENDPOINT, specs, 8, 1)

        assert executor.max_concurrent == 1
        assert manager.peak_in_flight == 1

    def test_category_assignment_is_deterministic(self):
        """Request id always receives specs[(id - 1) mod 5]."""
        specs = DatasetManager.prepare_specs(Mode.RERANK)
        executor = FakeRequestExecutor(delay=0.001)
        manager = ConcurrencyManager(executor)

        results = manager.run_requests(MagicMock(), TEST_ENDPOINT, specs, 23, 4)

        for result in results:
            assert result.category == specs[(result.request_id - 1) % 5].category
            assert executor.calls[result.request_id] is specs[(result.request_id - 1) % 5]

    def test_failures_do_not_abort_batch(self):
        """Failed requests are collected alongside successes."""
        specs = DatasetManager.prepare_specs(Mode.EMBEDDINGS)
        executor = FakeRequestExecutor(status_for=lambda request_id: 500 if request_id % 2 else 200)
        manager = ConcurrencyManager(executor)

        results = manager.run_requests(MagicMock(), TEST_ENDPOINT, specs, 10, 2)

        assert len(results) == 10
        assert sum(1 for r in results if r.succeeded) == 5

    def test_unexpected_error_recorded_as_failure(self):
        """An exception escaping the executor still yields one failed result."""
        specs = DatasetManager.prepare_specs(Mode.EMBEDDINGS)
        executor = MagicMock()
        executor.send_request.side_effect = RuntimeError("boom")
        manager = ConcurrencyManager(executor)

        results = manager.run_requests(MagicMock(), TEST_ENDPOINT, specs, 4, 2)

        assert sorted(r.request_id for r in results) == [1, 2, 3, 4]
        assert all(r.http_status == 0 for r in results)

    def test_on_result_called_per_completion(self):
        """The progress callback sees every result exactly once."""
        specs = DatasetManager.prepare_specs(Mode.EMBEDDINGS)
        manager = ConcurrencyManager(FakeRequestExecutor())
        seen = []

        manager.run_requests(MagicMock(), TEST_ENDPOINT, specs, 12, 4, on_result=seen.append)

        assert sorted(r.request_id for r in seen) == list(range(1, 13))
