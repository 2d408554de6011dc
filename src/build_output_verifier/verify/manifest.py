"""Package manifest builder configuration check."""

import json

from build_output_verifier.expectations import ManifestExpectation
from build_output_verifier.probe import FileProbe

from .types import CheckResult, CheckStatus

NAME = "Build configuration"


def check_manifest(probe: FileProbe, expected: ManifestExpectation) -> CheckResult:
    """Compare the nested builder block against the expected source/output.

    Values are compared as exact strings; "./src" does not match "src".
    """
    content = probe.read_text(expected.path)
    if content is None:
        return CheckResult(NAME, CheckStatus.FAIL, f"{expected.path} not found")

    try:
        manifest = json.loads(content)
    except (ValueError, RecursionError) as exc:
        return CheckResult(
            NAME, CheckStatus.FAIL, f"{expected.path} is not valid JSON ({exc})"
        )

    block = manifest.get(expected.key) if isinstance(manifest, dict) else None
    if (
        isinstance(block, dict)
        and block.get("source") == expected.source
        and block.get("output") == expected.output
    ):
        return CheckResult(NAME, CheckStatus.PASS, f"{expected.key} configuration is correct")

    return CheckResult(
        NAME,
        CheckStatus.FAIL,
        f"{expected.key} configuration missing or incorrect",
        remediation=(
            f'Set "{expected.key}": {{"source": "{expected.source}", '
            f'"output": "{expected.output}"}} in {expected.path}'
        ),
    )
