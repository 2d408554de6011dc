from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from build_output_verifier.probe import FileProbe
from build_output_verifier.ui import Reporter
from build_output_verifier.verify import CommandOutcome

MODULE_INDEX = "export { MyButton } from './components/Button/Button';\n"
BUTTON = "export const MyButton = ({ title }) => null;\n"
DECLARATIONS = "export { MyButton } from './components/Button/Button';\n"
SOURCEMAP = {"version": 3, "sources": ["../../src/index.tsx"], "mappings": "AAAA"}
MANIFEST = {
    "name": "my-button",
    "react-native-builder-bob": {"source": "src", "output": "lib", "targets": ["module"]},
}


class FakeDelegate:
    def __init__(self, outcome: CommandOutcome | None = None) -> None:
        self.outcome = outcome or CommandOutcome(0, "")
        self.commands: list[list[str]] = []

    def invoke(self, command: list[str]) -> CommandOutcome:
        self.commands.append(command)
        return self.outcome


class CapturingReporter(Reporter):
    def __init__(self, verbose: bool = False) -> None:
        self.buffer = io.StringIO()
        super().__init__(
            Console(file=self.buffer, width=200, color_system=None), verbose=verbose
        )

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


def write(root: Path, path: str, content: str) -> None:
    target = root / path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project whose build output satisfies every default expectation."""
    write(tmp_path, "lib/module/index.js", MODULE_INDEX)
    write(tmp_path, "lib/module/index.js.map", json.dumps(SOURCEMAP))
    write(tmp_path, "lib/module/components/Button/Button.js", BUTTON)
    write(tmp_path, "lib/typescript/src/index.d.ts", DECLARATIONS)
    write(tmp_path, "lib/typescript/src/index.d.ts.map", json.dumps(SOURCEMAP))
    write(tmp_path, "package.json", json.dumps(MANIFEST))
    return tmp_path


@pytest.fixture
def probe(project: Path) -> FileProbe:
    return FileProbe(project)


@pytest.fixture
def reporter() -> CapturingReporter:
    return CapturingReporter()


@pytest.fixture
def delegate() -> FakeDelegate:
    return FakeDelegate()
