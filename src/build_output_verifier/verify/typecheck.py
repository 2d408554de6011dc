"""Type-check delegation to an external compiler."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol

from .types import CheckResult, CheckStatus

logger = logging.getLogger(__name__)

NAME = "TypeScript declaration validation"
DEFAULT_TSC_COMMAND = ("npx", "tsc")
DEFAULT_TIMEOUT = 300.0


@dataclass(frozen=True)
class CommandOutcome:
    """Exit code and combined output of a delegated command."""

    exit_code: int
    output: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class Delegate(Protocol):
    def invoke(self, command: list[str]) -> CommandOutcome: ...


class SubprocessDelegate:
    """Runs commands as child processes with a bounded timeout.

    Spawn failures and timeouts are reported as failed outcomes, never raised.
    """

    def __init__(
        self, cwd: str | None = None, timeout: float | None = DEFAULT_TIMEOUT
    ) -> None:
        self.cwd = cwd
        self.timeout = timeout

    def invoke(self, command: list[str]) -> CommandOutcome:
        logger.debug("Invoking %s (cwd=%s, timeout=%s)", command, self.cwd, self.timeout)
        try:
            result = subprocess.run(
                command,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning("%s timed out after %ss", command[0], self.timeout)
            return CommandOutcome(124, f"Timed out after {self.timeout}s")
        except OSError as exc:
            logger.warning("Could not start %s: %s", command[0], exc)
            return CommandOutcome(127, str(exc))

        output = "\n".join(s.strip() for s in (result.stdout, result.stderr) if s.strip())
        return CommandOutcome(result.returncode, output)


def build_command(
    declaration_entry: str, tsc_command: tuple[str, ...] = DEFAULT_TSC_COMMAND
) -> list[str]:
    return [*tsc_command, "--noEmit", "--skipLibCheck", declaration_entry]


def check_declarations(delegate: Delegate, command: list[str]) -> CheckResult:
    """Pass iff the type checker exits 0; its output is surfaced verbatim."""
    outcome = delegate.invoke(command)
    if outcome.succeeded:
        return CheckResult(NAME, CheckStatus.PASS, f"{NAME} - Success")

    detail = outcome.output or f"exit code {outcome.exit_code}"
    return CheckResult(
        NAME,
        CheckStatus.FAIL,
        f"{NAME} - Failed: {detail}",
        remediation=" ".join(command),
    )
