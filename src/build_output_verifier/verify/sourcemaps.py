"""Source map checks.

Source maps are a debugging aid, so a map that is present but unusable is
reported as a warning rather than an error. Warnings still count as failed
checks in the tally.
"""

import json

from build_output_verifier.expectations import REBUILD_COMMAND
from build_output_verifier.probe import FileProbe

from .types import CheckResult, CheckStatus

REQUIRED_FIELDS = ("version", "sources", "mappings")


def check_sourcemap(probe: FileProbe, path: str) -> CheckResult:
    content = probe.read_text(path)
    if content is None:
        return CheckResult(
            path, CheckStatus.FAIL, f"{path} missing", remediation=REBUILD_COMMAND
        )

    try:
        data = json.loads(content)
    except (ValueError, RecursionError):
        return CheckResult(path, CheckStatus.WARN, f"{path} exists but is not valid JSON")

    if not isinstance(data, dict) or not all(data.get(f) for f in REQUIRED_FIELDS):
        return CheckResult(
            path, CheckStatus.WARN, f"{path} exists but missing required fields"
        )

    return CheckResult(path, CheckStatus.PASS, f"{path} is valid")


def check_sourcemaps(probe: FileProbe, paths: tuple[str, ...]) -> list[CheckResult]:
    return [check_sourcemap(probe, path) for path in paths]
