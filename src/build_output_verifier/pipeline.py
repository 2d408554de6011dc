"""Single-pass verification run.

Every check runs to completion regardless of earlier failures. Results are
reported as soon as each section finishes and folded into a RunTally that the
caller turns into an exit code.
"""

import logging
from collections.abc import Iterable

from build_output_verifier.expectations import DEFAULT_EXPECTATIONS, TIPS, ExpectedArtifactSet
from build_output_verifier.probe import FileProbe
from build_output_verifier.ui import Reporter, render_summary, render_tips
from build_output_verifier.verify import (
    CheckResult,
    Delegate,
    RunTally,
    build_command,
    check_artifacts,
    check_contents,
    check_declarations,
    check_manifest,
    check_sourcemaps,
)
from build_output_verifier.verify.typecheck import DEFAULT_TSC_COMMAND

logger = logging.getLogger(__name__)


def _record(reporter: Reporter, tally: RunTally, results: Iterable[CheckResult]) -> RunTally:
    for result in results:
        reporter.result(result)
        tally = tally.record(result)
    return tally


def run_checks(
    probe: FileProbe,
    delegate: Delegate,
    reporter: Reporter,
    expectations: ExpectedArtifactSet = DEFAULT_EXPECTATIONS,
    tsc_command: tuple[str, ...] = DEFAULT_TSC_COMMAND,
) -> RunTally:
    """Run all check sections in report order and return the final tally."""
    tally = RunTally()

    reporter.header("1. Checking Build Output Directory Structure")
    tally = _record(reporter, tally, check_artifacts(probe, expectations.directories))

    reporter.header("2. Checking Generated Files")
    tally = _record(reporter, tally, check_artifacts(probe, expectations.files))

    reporter.header("3. Verifying File Content")
    tally = _record(reporter, tally, check_contents(probe, expectations.content))

    reporter.header("4. Checking Source Maps")
    tally = _record(reporter, tally, check_sourcemaps(probe, expectations.sourcemaps))

    # Real imports would need React Native peer dependencies; check syntax instead
    reporter.header("5. Testing Import Resolution")
    tally = _record(reporter, tally, check_contents(probe, expectations.module_syntax))

    reporter.header("6. Validating TypeScript Declarations")
    command = build_command(expectations.declaration_entry, tsc_command)
    reporter.info(f"Running: {' '.join(command)}")
    tally = _record(reporter, tally, [check_declarations(delegate, command)])

    reporter.header("7. Checking Package.json Configuration")
    tally = _record(reporter, tally, [check_manifest(probe, expectations.manifest)])

    logger.debug("Checks finished: %d/%d passed", tally.passed, tally.total)
    return tally


def verify_build(
    probe: FileProbe,
    delegate: Delegate,
    reporter: Reporter,
    expectations: ExpectedArtifactSet = DEFAULT_EXPECTATIONS,
    tsc_command: tuple[str, ...] = DEFAULT_TSC_COMMAND,
    tips: tuple[str, ...] | None = None,
) -> RunTally:
    """Run every check, then print the summary and tips."""
    reporter.header("🔍 Build Output Verification")
    tally = run_checks(probe, delegate, reporter, expectations, tsc_command)
    render_summary(reporter, tally)
    render_tips(reporter, tally, TIPS if tips is None else tips)
    return tally
