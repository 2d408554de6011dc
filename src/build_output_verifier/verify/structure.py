"""Directory and file topology checks."""

from build_output_verifier.expectations import REBUILD_COMMAND, ArtifactKind, ExpectedArtifact
from build_output_verifier.probe import FileProbe

from .types import CheckResult, CheckStatus


def check_artifact(probe: FileProbe, artifact: ExpectedArtifact) -> CheckResult:
    """Check that one declared anchor path exists with the right kind."""
    path = artifact.path

    if artifact.kind == ArtifactKind.DIRECTORY:
        if probe.is_directory(path):
            return CheckResult(path, CheckStatus.PASS, f"{path}/ directory exists")
        return CheckResult(
            path,
            CheckStatus.FAIL,
            f"{path}/ directory missing",
            remediation=REBUILD_COMMAND,
        )

    if probe.exists(path) and not probe.is_directory(path):
        size = probe.size(path)
        return CheckResult(path, CheckStatus.PASS, f"{path} exists ({size} bytes)")
    return CheckResult(path, CheckStatus.FAIL, f"{path} missing", remediation=REBUILD_COMMAND)


def check_artifacts(
    probe: FileProbe, artifacts: tuple[ExpectedArtifact, ...]
) -> list[CheckResult]:
    return [check_artifact(probe, artifact) for artifact in artifacts]
