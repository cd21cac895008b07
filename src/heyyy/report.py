from __future__ import annotations

from heyyy.config import RunConfig
from heyyy.metrics import RunReport


def format_config(config: RunConfig) -> list[str]:
    return [
        "Starting load test:",
        f"URL: {config.url}",
        f"Requests per second: {config.rate}",
        f"Total requests: {config.total_requests}",
        "",
    ]


def format_report(report: RunReport) -> list[str]:
    lines = [
        "Test completed!",
        f"Total time: {report.elapsed_sec:.2f} seconds",
        f"Successful requests: {report.successful}",
        f"Failed requests: {report.failed}",
        f"Requests per second: {report.requests_per_sec:.2f}",
    ]
    if report.successful:
        lat = report.latency
        lines.append(
            f"Latency (ms): min={lat.min_ms:.2f} mean={lat.mean_ms:.2f} "
            f"p50={lat.p50_ms:.2f} p95={lat.p95_ms:.2f} p99={lat.p99_ms:.2f} max={lat.max_ms:.2f}"
        )
    if report.error_counts:
        lines.append("")
        lines.append("Failure breakdown:")
        for error_type, count in sorted(report.error_counts.items(), key=lambda item: item[0].value):
            lines.append(f"  {error_type.value}: {count}")
    if report.status_codes:
        lines.append("")
        lines.append("Status code distribution:")
        for code, count in sorted(report.status_codes.items()):
            lines.append(f"  {code}: {count}")
    return lines
