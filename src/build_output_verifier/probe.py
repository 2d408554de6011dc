"""Read-only filesystem queries against the project root."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileProbe:
    """Existence, type, size and text queries relative to ``root``.

    Absence is a normal outcome: no query raises for a missing path.
    """

    def __init__(self, root: Path | str = ".") -> None:
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        return self.root / path

    def exists(self, path: str) -> bool:
        try:
            return self.resolve(path).exists()
        except OSError:
            return False

    def is_directory(self, path: str) -> bool:
        try:
            return self.resolve(path).is_dir()
        except OSError:
            return False

    def size(self, path: str) -> int:
        """Size in bytes, 0 if not found or not accessible."""
        try:
            return self.resolve(path).stat().st_size
        except OSError:
            return 0

    def read_text(self, path: str) -> str | None:
        """Read file contents, return None if not found or not readable."""
        target = self.resolve(path)
        try:
            content = target.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("Cannot read %s: %s", target, exc)
            return None
        logger.debug("Read %d characters from %s", len(content), target)
        return content
