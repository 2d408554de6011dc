from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from build_output_verifier.expectations import (
    ArtifactKind,
    DEFAULT_EXPECTATIONS,
    ExpectedArtifact,
    ExpectedArtifactSet,
)
from build_output_verifier.pipeline import run_checks, verify_build
from build_output_verifier.probe import FileProbe
from build_output_verifier.ui import exit_code
from build_output_verifier.verify import CommandOutcome

from .conftest import CapturingReporter, FakeDelegate, write

TOTAL_CHECKS = 15


def _run(project: Path, delegate: FakeDelegate | None = None) -> tuple[int, int, str]:
    reporter = CapturingReporter()
    tally = verify_build(FileProbe(project), delegate or FakeDelegate(), reporter)
    return tally.passed, tally.total, reporter.output


def test_complete_build_is_perfect(project: Path) -> None:
    reporter = CapturingReporter()
    tally = verify_build(FileProbe(project), FakeDelegate(), reporter)

    assert (tally.passed, tally.total) == (TOTAL_CHECKS, TOTAL_CHECKS)
    assert tally.success_rate == 100
    assert exit_code(tally) == 0
    assert "🎉" in reporter.output
    assert "Tips" not in reporter.output


def test_sections_are_reported_in_order(project: Path) -> None:
    _, _, output = _run(project)
    headers = [
        "🔍 Build Output Verification",
        "1. Checking Build Output Directory Structure",
        "2. Checking Generated Files",
        "3. Verifying File Content",
        "4. Checking Source Maps",
        "5. Testing Import Resolution",
        "6. Validating TypeScript Declarations",
        "7. Checking Package.json Configuration",
        "📊 Verification Summary",
    ]
    positions = [output.index(h) for h in headers]
    assert positions == sorted(positions)


@pytest.mark.parametrize("directory", ["lib/module", "lib/typescript"])
def test_removing_a_directory_fails_the_run(project: Path, directory: str) -> None:
    shutil.rmtree(project / directory)
    passed, total, output = _run(project)

    assert total == TOTAL_CHECKS
    assert passed < TOTAL_CHECKS
    assert f"❌ {directory}/ directory missing" in output
    assert "💡 Tips" in output


def test_removing_a_directory_costs_exactly_one_structure_check(project: Path) -> None:
    expectations = ExpectedArtifactSet(
        directories=DEFAULT_EXPECTATIONS.directories
        + (ExpectedArtifact("lib/commonjs", ArtifactKind.DIRECTORY),),
        files=DEFAULT_EXPECTATIONS.files,
        content=DEFAULT_EXPECTATIONS.content,
        sourcemaps=DEFAULT_EXPECTATIONS.sourcemaps,
        module_syntax=DEFAULT_EXPECTATIONS.module_syntax,
        declaration_entry=DEFAULT_EXPECTATIONS.declaration_entry,
    )
    (project / "lib" / "commonjs").mkdir()
    baseline = run_checks(FileProbe(project), FakeDelegate(), CapturingReporter(), expectations)

    (project / "lib" / "commonjs").rmdir()
    tally = run_checks(FileProbe(project), FakeDelegate(), CapturingReporter(), expectations)

    assert baseline.passed == baseline.total
    assert tally.total == baseline.total
    assert tally.passed == baseline.passed - 1
    assert exit_code(tally) == 1


def test_commonjs_marker_fails_import_resolution(project: Path) -> None:
    write(project, "lib/module/index.js", "export const a = 1;\nmodule.exports = { a };\n")
    passed, total, output = _run(project)

    assert passed == total - 1
    assert "contains 'module.exports'" in output


def test_malformed_and_missing_sourcemaps_are_reported_differently(project: Path) -> None:
    write(project, "lib/module/index.js.map", "not json")
    (project / "lib/typescript/src/index.d.ts.map").unlink()
    passed, total, output = _run(project)

    assert "⚠️  lib/module/index.js.map exists but is not valid JSON" in output
    assert "❌ lib/typescript/src/index.d.ts.map missing" in output
    # the malformed map counts once, the missing map fails both its file and map checks
    assert passed == total - 3


def test_type_check_failure_is_one_failed_check(project: Path) -> None:
    delegate = FakeDelegate(CommandOutcome(2, "error TS1005: ';' expected."))
    passed, total, output = _run(project, delegate)

    assert passed == total - 1
    assert "Running: npx tsc --noEmit --skipLibCheck lib/typescript/src/index.d.ts" in output
    assert "error TS1005: ';' expected." in output
    assert delegate.commands == [
        ["npx", "tsc", "--noEmit", "--skipLibCheck", "lib/typescript/src/index.d.ts"]
    ]


def test_empty_project_is_broken_but_completes(tmp_path: Path) -> None:
    delegate = FakeDelegate(CommandOutcome(127, "npx: not found"))
    passed, total, output = _run(tmp_path, delegate)

    assert (passed, total) == (0, TOTAL_CHECKS)
    assert "Many checks failed (0/15 - 0%)" in output
    assert "package.json not found" in output


def test_lib_written_as_a_file_still_completes_the_run(tmp_path: Path) -> None:
    write(tmp_path, "lib", "oops")
    passed, total, output = _run(tmp_path)

    assert (passed, total) == (1, TOTAL_CHECKS)
    assert "❌ lib/ directory missing" in output
    assert "lib/module/index.js not found for content verification" in output
    assert "📊 Verification Summary" in output
