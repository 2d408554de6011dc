"""
Expected build output of a packaged React Native library.

These definitions describe the publishable surface produced by
react-native-builder-bob: the ES module tree under lib/module, the
declaration tree under lib/typescript and the builder block in package.json.
Check logic lives in verify/; swap in another ExpectedArtifactSet to verify a
different layout.
"""

from dataclasses import dataclass, field
from enum import Enum


class ArtifactKind(Enum):
    """Kind of filesystem entry an artifact must be."""

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class ExpectedArtifact:
    path: str
    kind: ArtifactKind


@dataclass(frozen=True)
class ContentAssertion:
    """A file must contain ``required`` and, if set, must not contain ``forbidden``."""

    path: str
    required: str
    description: str
    forbidden: str | None = None


@dataclass(frozen=True)
class ManifestExpectation:
    """Nested builder configuration expected in the package manifest."""

    path: str = "package.json"
    key: str = "react-native-builder-bob"
    source: str = "src"
    output: str = "lib"


@dataclass(frozen=True)
class ExpectedArtifactSet:
    """Everything a verification run checks, in report order."""

    directories: tuple[ExpectedArtifact, ...]
    files: tuple[ExpectedArtifact, ...]
    content: tuple[ContentAssertion, ...]
    sourcemaps: tuple[str, ...]
    module_syntax: tuple[ContentAssertion, ...]
    declaration_entry: str
    manifest: ManifestExpectation = field(default_factory=ManifestExpectation)

    @property
    def artifacts(self) -> tuple[ExpectedArtifact, ...]:
        return self.directories + self.files


LIB_DIR = "lib"
MODULE_DIR = f"{LIB_DIR}/module"
TYPESCRIPT_DIR = f"{LIB_DIR}/typescript"

MODULE_ENTRY = f"{MODULE_DIR}/index.js"
DECLARATION_ENTRY = f"{TYPESCRIPT_DIR}/src/index.d.ts"

# ES module export marker and the CommonJS marker that must not accompany it
EXPORT_MARKER = "export"
COMMONJS_MARKER = "module.exports"

DEFAULT_EXPECTATIONS = ExpectedArtifactSet(
    directories=(
        ExpectedArtifact(LIB_DIR, ArtifactKind.DIRECTORY),
        ExpectedArtifact(MODULE_DIR, ArtifactKind.DIRECTORY),
        ExpectedArtifact(TYPESCRIPT_DIR, ArtifactKind.DIRECTORY),
    ),
    files=(
        ExpectedArtifact(MODULE_ENTRY, ArtifactKind.FILE),
        ExpectedArtifact(f"{MODULE_ENTRY}.map", ArtifactKind.FILE),
        ExpectedArtifact(DECLARATION_ENTRY, ArtifactKind.FILE),
        ExpectedArtifact(f"{DECLARATION_ENTRY}.map", ArtifactKind.FILE),
    ),
    content=(
        ContentAssertion(MODULE_ENTRY, EXPORT_MARKER, "exports"),
        ContentAssertion(DECLARATION_ENTRY, EXPORT_MARKER, "type exports"),
    ),
    sourcemaps=(
        f"{MODULE_ENTRY}.map",
        f"{DECLARATION_ENTRY}.map",
    ),
    module_syntax=(
        ContentAssertion(
            MODULE_ENTRY,
            EXPORT_MARKER,
            "ES module exports",
            forbidden=COMMONJS_MARKER,
        ),
        # Regression guard for the Button component's named export
        ContentAssertion(
            f"{MODULE_DIR}/components/Button/Button.js",
            "export const MyButton",
            "MyButton component export",
        ),
    ),
    declaration_entry=DECLARATION_ENTRY,
)

REBUILD_COMMAND = "npx bob build --clean"

TIPS: tuple[str, ...] = (
    f'Run "{REBUILD_COMMAND}" for a fresh build',
    "Check that your src/index.tsx exports are correct",
    "Verify your Build Bob configuration in package.json",
    "For React Native components, import testing should be done in a "
    "React Native environment",
)
