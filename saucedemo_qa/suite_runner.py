"""Run the pytest suite in a subprocess and summarize the outcome."""

from __future__ import annotations

import logging
import re
import subprocess
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

logger = logging.getLogger("saucedemo-qa.suite-runner")

_SUMMARY_COUNT_RE = re.compile(r"(\d+) (passed|failed|skipped|errors?|xfailed|xpassed)")
_FAILED_NODE_RE = re.compile(r"^(?:FAILED|ERROR) (\S+)", re.MULTILINE)


@dataclass(frozen=True)
class SuiteCommand:
    """Concrete pytest invocation plus a plain fallback."""

    cmd: list[str]
    fallback_cmd: list[str]
    report_file: str = "N/A"


@dataclass
class SuiteSummary:
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    errors: int = 0
    failed_tests: list[str] = field(default_factory=list)
    no_tests_collected: bool = False


def build_command(
    test_path: str,
    test_results_dir: Path,
    marker: str = "",
    keyword: str = "",
) -> SuiteCommand:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    report_file = test_results_dir / f"report_{timestamp}.html"

    selection: list[str] = []
    if marker:
        selection += ["-m", marker]
    if keyword:
        selection += ["-k", keyword]

    base = [sys.executable, "-m", "pytest", "-v", "--tb=short", *selection]
    return SuiteCommand(
        cmd=[*base, f"--html={report_file}", "--self-contained-html", test_path],
        fallback_cmd=[*base, test_path],
        report_file=str(report_file),
    )


def parse_summary(output: str) -> SuiteSummary:
    """Extract counts and failing node ids from pytest output."""
    summary = SuiteSummary()
    summary_lines = [line for line in output.splitlines() if re.search(r"\bin [\d.]+s\b", line)]
    if summary_lines:
        for count, outcome in _SUMMARY_COUNT_RE.findall(summary_lines[-1]):
            if outcome == "passed":
                summary.passed = int(count)
            elif outcome == "failed":
                summary.failed = int(count)
            elif outcome == "skipped":
                summary.skipped = int(count)
            elif outcome.startswith("error"):
                summary.errors = int(count)

    summary.failed_tests = _FAILED_NODE_RE.findall(output)
    lowered = output.lower()
    summary.no_tests_collected = any(marker in lowered for marker in ("no tests ran", "collected 0 items"))
    return summary


def _run_command(cmd: list[str], cwd: str, timeout: int = 1800) -> subprocess.CompletedProcess[str]:
    return subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, timeout=timeout)


def _run_suite(project_dir: str, command: SuiteCommand) -> tuple[bool, dict]:
    logger.info("Executing pytest command: %s", " ".join(command.cmd))
    try:
        primary = _run_command(command.cmd, project_dir)
        combined = f"{primary.stdout}\n{primary.stderr}"

        # pytest-html is optional; retry without its flags when it is absent
        if primary.returncode != 0 and "unrecognized arguments:" in combined:
            logger.info("pytest-html unavailable, retrying without report flags")
            fallback = _run_command(command.fallback_cmd, project_dir)
            return True, {
                "exit_code": fallback.returncode,
                "stdout": fallback.stdout,
                "stderr": fallback.stderr,
                "report_file": "N/A (fallback mode)",
            }

        return True, {
            "exit_code": primary.returncode,
            "stdout": primary.stdout,
            "stderr": primary.stderr,
            "report_file": command.report_file,
        }
    except subprocess.TimeoutExpired:
        return False, {"error": "Suite execution timed out"}
    except FileNotFoundError as cmd_error:
        return False, {"error": f"Missing test command: {cmd_error}"}


async def run_suite(
    project_dir: str,
    test_results_dir: Path,
    test_path: str = "tests",
    marker: str = "",
    keyword: str = "",
) -> str:
    """Run pytest over *test_path* inside *project_dir* and report the outcome."""
    if not project_dir.strip():
        return "❌ Error: Project directory is required"
    if not Path(project_dir).is_dir():
        return f"❌ Error: Path not found: {project_dir}"

    test_results_dir.mkdir(parents=True, exist_ok=True)
    command = build_command(test_path, test_results_dir, marker, keyword)
    success, result = _run_suite(project_dir, command)
    if not success:
        return f"❌ Suite execution error: {result.get('error', 'Unknown error')}"

    combined_output = f"{result.get('stdout', '')}\n{result.get('stderr', '')}".strip()
    summary = parse_summary(combined_output)
    exit_code = result.get("exit_code", 1)

    if exit_code == 0 and not summary.no_tests_collected:
        status = "✅"
    elif summary.no_tests_collected:
        status = "⚠️"
    else:
        status = "❌"

    failed_list = "\n".join(f"  - {node}" for node in summary.failed_tests) or "  (none)"

    return f"""{status} Suite Run Complete

📊 Results:
- Passed: {summary.passed}
- Failed: {summary.failed}
- Errors: {summary.errors}
- Skipped: {summary.skipped}
- No tests collected: {summary.no_tests_collected}

📄 Report: {result.get('report_file')}

Failing tests:
{failed_list}

{combined_output[-1600:]}
"""
