# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import io

import pytest

from prodcheck.config import FormatSettings
from prodcheck.errors import FailureKind
from prodcheck.exit_codes import EXIT_FAILED, EXIT_OK, exit_code_for, terminate
from prodcheck.models import AggregateReport, ProbeResult
from prodcheck.scan.report import print_report, render_report, result_line

PLAIN = FormatSettings.plain()


def _report(*results):
    return AggregateReport.from_results(results)


def test_render_all_passed_plain():
    report = _report(ProbeResult("Health endpoint", True), ProbeResult("Models API", True))
    assert render_report(report, PLAIN) == [
        "",
        "═══ Results ═══",
        "",
        "✓ Health endpoint",
        "✓ Models API",
        "",
        "═══ Summary ═══",
        "Passed: 2/2",
        "✓ All tests passed!",
        "Production build is working correctly!",
    ]


def test_render_some_failed_includes_error_in_parentheses():
    report = _report(
        ProbeResult("Health endpoint", True),
        ProbeResult("FFmpegUtils", False, "spawn ffmpeg ENOENT", FailureKind.COLLABORATOR),
        ProbeResult("404 handling", False),
    )
    lines = render_report(report, PLAIN)
    assert "✗ FFmpegUtils (spawn ffmpeg ENOENT)" in lines
    assert "✗ 404 handling" in lines
    assert "Passed: 1/3" in lines
    assert lines[-1] == "✗ Some tests failed"
    assert "All tests passed" not in "\n".join(lines)


def test_render_is_deterministic_and_colored_by_default():
    report = _report(ProbeResult("Health endpoint", False, "refused"))
    assert render_report(report) == render_report(report)
    fmt = FormatSettings()
    assert result_line(report.results[0], fmt) == f"{fmt.red}✗{fmt.reset} Health endpoint (refused)"
    assert render_report(report)[1] == f"{fmt.yellow}═══ Results ═══{fmt.reset}"


def test_print_report_writes_to_stream():
    stream = io.StringIO()
    print_report(_report(ProbeResult("a", True)), PLAIN, stream=stream)
    assert stream.getvalue().endswith("Production build is working correctly!\n")


def test_print_report_defaults_to_stdout(capsys):
    print_report(_report(ProbeResult("a", False)), PLAIN)
    assert "Some tests failed" in capsys.readouterr().out


def test_exit_codes_follow_overall_success():
    assert exit_code_for(_report(ProbeResult("a", True))) == EXIT_OK == 0
    assert exit_code_for(_report(ProbeResult("a", True), ProbeResult("b", False))) == EXIT_FAILED == 1


def test_terminate_raises_system_exit():
    with pytest.raises(SystemExit) as excinfo:
        terminate(_report(ProbeResult("a", False)))
    assert excinfo.value.code == 1
    with pytest.raises(SystemExit) as excinfo:
        terminate(_report(ProbeResult("a", True)))
    assert excinfo.value.code == 0
