"""
Tests for the one-shot CLI entry point.
"""
from src import cli
from src.core.config import log_level
from src.core.entities.threshold import ThresholdReport, TierThreshold
from src.core.errors import ResolveError, ResolveErrorKind

REPORT = ThresholdReport(
    total_participants=1_000_000,
    thresholds=[
        TierThreshold(percentile=0.0001, rank=100, points=5000),
        TierThreshold(percentile=0.001, rank=1000, points=3000),
    ],
)


def test_format_report_lists_points_then_tiers():
    lines = cli.format_report(REPORT).splitlines()

    assert lines[0] == "Points for top ranks: [5000, 3000]"
    assert lines[2].split() == ["0.01%", "100", "5000"]
    assert lines[3].split() == ["0.1%", "1000", "3000"]


def test_main_prints_report(monkeypatch, capsys):
    async def fake_run():
        return REPORT

    monkeypatch.setattr(cli, "run", fake_run)

    assert cli.main() == 0
    assert "Points for top ranks: [5000, 3000]" in capsys.readouterr().out


def test_main_reports_error_without_result(monkeypatch, capsys):
    async def failing_run():
        raise ResolveError(ResolveErrorKind.TOTALS_UNAVAILABLE, "failed to get total participants: boom")

    monkeypatch.setattr(cli, "run", failing_run)

    assert cli.main() == 1
    assert "Points for top ranks" not in capsys.readouterr().out


def test_log_level_reads_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert log_level() == "DEBUG"

    monkeypatch.delenv("LOG_LEVEL")
    assert log_level() == "INFO"
