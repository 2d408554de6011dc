"""Build output verification checks."""

from .content import check_content, check_contents
from .manifest import check_manifest
from .sourcemaps import check_sourcemap, check_sourcemaps
from .structure import check_artifact, check_artifacts
from .typecheck import (
    CommandOutcome,
    Delegate,
    SubprocessDelegate,
    build_command,
    check_declarations,
)
from .types import CheckResult, CheckStatus, RunTally

__all__ = [
    "CheckResult",
    "CheckStatus",
    "CommandOutcome",
    "Delegate",
    "RunTally",
    "SubprocessDelegate",
    "build_command",
    "check_artifact",
    "check_artifacts",
    "check_content",
    "check_contents",
    "check_declarations",
    "check_manifest",
    "check_sourcemap",
    "check_sourcemaps",
]
