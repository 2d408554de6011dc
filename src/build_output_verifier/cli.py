import logging
import shlex
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from build_output_verifier.expectations import DEFAULT_EXPECTATIONS
from build_output_verifier.verify.typecheck import DEFAULT_TIMEOUT, DEFAULT_TSC_COMMAND


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
def main():
    """Verify library build output before publishing."""
    pass


@main.command()
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path("."),
    envvar="BUILD_VERIFY_ROOT",
    show_default=True,
    help="Project root containing lib/ and package.json",
)
@click.option(
    "--tsc-command",
    default=shlex.join(DEFAULT_TSC_COMMAND),
    envvar="BUILD_VERIFY_TSC",
    show_default=True,
    help="Type checker command used to validate declarations",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_TIMEOUT,
    envvar="BUILD_VERIFY_TIMEOUT",
    show_default=True,
    help="Seconds to wait for the type checker",
)
@click.option(
    "--verbose", "-v", is_flag=True, help="Show remediation hints and debug logs"
)
def verify(root: Path, tsc_command: str, timeout: float, verbose: bool):
    """Check build artifacts and exit non-zero unless every check passes."""
    from build_output_verifier.pipeline import verify_build
    from build_output_verifier.probe import FileProbe
    from build_output_verifier.ui import Reporter, exit_code
    from build_output_verifier.verify import SubprocessDelegate

    _configure_logging(verbose)

    command = tuple(shlex.split(tsc_command))
    if not command:
        raise click.BadParameter("must not be empty", param_hint="--tsc-command")

    tally = verify_build(
        probe=FileProbe(root),
        delegate=SubprocessDelegate(cwd=str(root), timeout=timeout),
        reporter=Reporter(verbose=verbose),
        tsc_command=command,
    )
    raise SystemExit(exit_code(tally))


@main.command()
def expected():
    """List the artifacts a verification run checks."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Check", style="cyan", min_width=14)
    table.add_column("Path", min_width=30)
    table.add_column("Expectation", min_width=20)

    for artifact in DEFAULT_EXPECTATIONS.artifacts:
        table.add_row("Structure", artifact.path, artifact.kind.value)
    for assertion in DEFAULT_EXPECTATIONS.content + DEFAULT_EXPECTATIONS.module_syntax:
        expectation = f"contains '{assertion.required}'"
        if assertion.forbidden:
            expectation += f", not '{assertion.forbidden}'"
        table.add_row("Content", assertion.path, expectation)
    for path in DEFAULT_EXPECTATIONS.sourcemaps:
        table.add_row("Source map", path, "version, sources, mappings")
    table.add_row("Types", DEFAULT_EXPECTATIONS.declaration_entry, "tsc --noEmit passes")
    manifest = DEFAULT_EXPECTATIONS.manifest
    table.add_row(
        "Manifest",
        manifest.path,
        f"{manifest.key}: source={manifest.source}, output={manifest.output}",
    )

    Console().print(table)


if __name__ == "__main__":
    main()
