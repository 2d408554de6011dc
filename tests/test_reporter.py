from __future__ import annotations

from build_output_verifier.verify import CheckResult, CheckStatus

from .conftest import CapturingReporter


def test_levels_use_fixed_prefixes() -> None:
    reporter = CapturingReporter()
    reporter.success("ok")
    reporter.error("bad")
    reporter.warning("hmm")
    reporter.info("fyi")
    reporter.header("Section")

    assert reporter.output.splitlines() == [
        "✅ ok",
        "❌ bad",
        "⚠️  hmm",
        "ℹ️  fyi",
        "",
        "Section",
    ]


def test_brackets_are_not_treated_as_markup() -> None:
    reporter = CapturingReporter()
    reporter.error("Failed: type '[bold]x[/bold]' is not assignable")
    assert "[bold]x[/bold]" in reporter.output


def test_remediation_only_shown_when_verbose() -> None:
    result = CheckResult("lib", CheckStatus.FAIL, "lib/ directory missing", "npx bob build")

    quiet = CapturingReporter()
    quiet.result(result)
    verbose = CapturingReporter(verbose=True)
    verbose.result(result)

    assert "npx bob build" not in quiet.output
    assert "↳ npx bob build" in verbose.output
