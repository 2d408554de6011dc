"""Substring marker checks on built files.

Containment is a cheap proxy for "this file was transpiled and exports
something"; nothing is parsed.
"""

from build_output_verifier.expectations import REBUILD_COMMAND, ContentAssertion
from build_output_verifier.probe import FileProbe

from .types import CheckResult, CheckStatus


def check_content(probe: FileProbe, assertion: ContentAssertion) -> CheckResult:
    path = assertion.path
    content = probe.read_text(path)

    if content is None:
        return CheckResult(
            path,
            CheckStatus.FAIL,
            f"{path} not found for content verification",
            remediation=REBUILD_COMMAND,
        )

    # A forbidden marker fails the check even when the required one is present
    if assertion.forbidden and assertion.forbidden in content:
        return CheckResult(
            path,
            CheckStatus.FAIL,
            f"{path} contains '{assertion.forbidden}', not {assertion.description}",
            remediation="Check the module target in the builder configuration",
        )

    if assertion.required not in content:
        return CheckResult(
            path,
            CheckStatus.FAIL,
            f"{path} missing {assertion.description}",
            remediation="Check that src/index.tsx exports are correct",
        )

    return CheckResult(path, CheckStatus.PASS, f"{path} contains {assertion.description}")


def check_contents(
    probe: FileProbe, assertions: tuple[ContentAssertion, ...]
) -> list[CheckResult]:
    return [check_content(probe, assertion) for assertion in assertions]
