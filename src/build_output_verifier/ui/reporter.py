"""Leveled console output for verification runs."""

from rich.console import Console
from rich.text import Text

from build_output_verifier.verify.types import CheckResult, CheckStatus


class Reporter:
    """Prints one line per event with a fixed emoji and color convention.

    Lines are built as ``Text`` so delegate output containing brackets is
    printed as-is instead of being parsed as markup.
    """

    def __init__(self, console: Console | None = None, verbose: bool = False) -> None:
        self.console = console or Console(highlight=False)
        self.verbose = verbose

    def _line(self, message: str, style: str) -> None:
        self.console.print(Text(message, style=style))

    def success(self, message: str) -> None:
        self._line(f"✅ {message}", "green")

    def error(self, message: str) -> None:
        self._line(f"❌ {message}", "red")

    def warning(self, message: str) -> None:
        self._line(f"⚠️  {message}", "yellow")

    def info(self, message: str) -> None:
        self._line(f"ℹ️  {message}", "blue")

    def header(self, message: str) -> None:
        self.console.print()
        self._line(message, "bold blue")

    def result(self, result: CheckResult) -> None:
        if result.status == CheckStatus.PASS:
            self.success(result.message)
        elif result.status == CheckStatus.WARN:
            self.warning(result.message)
        else:
            self.error(result.message)

        if self.verbose and result.remediation and not result.passed:
            self._line(f"   ↳ {result.remediation}", "dim")
