"""Formats run headers, progress and reports for the console."""
from typing import List, Sequence

from src.const import FAILURE_GLYPH, SUCCESS_GLYPH
from .constants import ModeProfile
from .models import Mode, Report, RequestResult, RequestSpec, RunParameters


class ReportPrinter:
    """Formats run headers, progress and reports for the console."""

    def __init__(self, profile: ModeProfile):
        self.profile = profile

    def format_header(self, params: RunParameters, specs: Sequence[RequestSpec]) -> str:
        title = f"🚀 {self.profile.title}"
        lines = [
            title,
            "=" * (len(title) + 2),
            f"Endpoint: {params.endpoint}",
            f"Model: {params.model}",
            f"Requests: {params.request_count}",
            f"Concurrent: {params.concurrency}",
            "",
            f"{self.profile.lengths_heading}:",
        ]
        for spec in specs:
            lines.append(f"  {spec.category}: {spec.query_token_count} words")
        if params.mode == Mode.RERANK and specs:
            lines.append("")
            lines.append(f"Document pool: {len(specs[0].documents)} documents")
        lines.append("")
        return "\n".join(lines)

    @staticmethod
    def format_progress_prefix() -> str:
        return "Starting test...\nProgress: "

    @staticmethod
    def glyph(result: RequestResult) -> str:
        return SUCCESS_GLYPH if result.succeeded else FAILURE_GLYPH

    def format_report(self, report: Report) -> str:
        """Render the Report; derived sections only appear when something succeeded."""
        lines: List[str] = [
            "",
            "",
            "📊 Results:",
            "===========",
            f"Total Requests: {report.total_requests}",
            f"Successful: {report.successful}",
            f"Failed: {report.failed}",
            f"Success Rate: {report.success_rate:.1f}%",
            "",
        ]

        if report.latency is not None:
            latency = report.latency
            lines.extend([
                "Overall Performance (successful requests):",
                f"  Average Response Time: {latency.average:.3f} seconds",
                f"  Median Response Time:  {latency.median:.3f} seconds",
                f"  Min Response Time:     {latency.minimum:.3f} seconds",
                f"  Max Response Time:     {latency.maximum:.3f} seconds",
                f"  P95 Response Time:     {latency.p95:.3f} seconds",
                "",
            ])

            heading = f"{self.profile.category_heading}:"
            lines.extend([heading, "=" * len(heading)])
            for stats in report.categories:
                if report.mode == Mode.RERANK:
                    lines.append(f"  {stats.category}:")
                    lines.append(f"    Query tokens: {stats.query_token_count}, Total tokens: {stats.token_count}")
                else:
                    lines.append(f"  {stats.category} ({stats.token_count} tokens):")
                lines.append(
                    f"    Count: {stats.count}, Avg: {stats.average:.3f}s, "
                    f"Min: {stats.minimum:.3f}s, Max: {stats.maximum:.3f}s"
                )
            lines.append("")

            if report.scores is not None:
                scores = report.scores
                lines.extend([
                    "Reranking Score Statistics:",
                    "==========================",
                    f"  Valid scores: {scores.count}",
                    f"  Average top score: {scores.average:.4f}",
                    f"  Min top score: {scores.minimum:.4f}",
                    f"  Max top score: {scores.maximum:.4f}",
                    "",
                ])

        lines.append(f"Total Test Duration: {report.total_duration:.2f} seconds")
        lines.append(f"Requests per Second: {report.requests_per_second:.2f}")
        if report.successful > 0:
            lines.append(f"Total Tokens Processed: {report.total_tokens}")
            lines.append(f"Tokens per Second: {report.tokens_per_second:.2f}")

        lines.extend(["", "🎉 Test completed!"])
        return "\n".join(lines)

    def format_usage(self, script_name: str) -> str:
        lines = [
            "",
            f"Usage: {script_name} [REQUESTS] [CONCURRENT]",
            f"Example: {script_name} 100 20    # 100 requests, 20 concurrent",
            "",
        ]
        lines.extend(self.profile.usage_lines)
        return "\n".join(lines)
