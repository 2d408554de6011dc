"""Success rate banding, summary text and exit code selection."""

from enum import Enum

from build_output_verifier.verify.types import RunTally

from .reporter import Reporter


class Band(Enum):
    """Severity band of a run, from best to worst."""

    PERFECT = "perfect"
    MINOR_ISSUES = "minor issues"
    DEGRADED = "degraded"
    BROKEN = "broken"


def classify(success_rate: int) -> Band:
    if success_rate == 100:
        return Band.PERFECT
    if success_rate >= 90:
        return Band.MINOR_ISSUES
    if success_rate >= 75:
        return Band.DEGRADED
    return Band.BROKEN


def exit_code(tally: RunTally) -> int:
    """0 only for a fully verified run. Callers should rely on this, not the text."""
    return 0 if classify(tally.success_rate) == Band.PERFECT else 1


def render_summary(reporter: Reporter, tally: RunTally) -> Band:
    rate = tally.success_rate
    band = classify(rate)
    counts = f"{tally.passed}/{tally.total}"

    reporter.header("📊 Verification Summary")
    if band == Band.PERFECT:
        reporter.success(f"All checks passed! ({counts})")
        reporter.success("🎉 The build output is ready to publish!")
    elif band == Band.MINOR_ISSUES:
        reporter.warning(f"Most checks passed ({counts} - {rate}%)")
        reporter.warning("The build is working well with minor issues.")
    elif band == Band.DEGRADED:
        reporter.warning(f"Some checks failed ({counts} - {rate}%)")
        reporter.warning("The build is mostly working, but there are some issues to address.")
    else:
        reporter.error(f"Many checks failed ({counts} - {rate}%)")
        reporter.error("The build has significant issues that need to be fixed.")
    return band


def render_tips(
    reporter: Reporter, tally: RunTally, tips: tuple[str, ...]
) -> None:
    """Print remediation tips, unless the run was perfect."""
    if tally.success_rate == 100 or not tips:
        return
    reporter.header("💡 Tips")
    reporter.info("To fix issues:")
    for tip in tips:
        reporter.info(f"• {tip}")
