"""Thin filesystem provider injected into the generator."""

from pathlib import Path


class Filesystem:
    """Exists/make-directory/put operations over pathlib."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def make_directory(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def put(self, path: Path, contents: str) -> None:
        Path(path).write_text(contents, encoding="utf-8")
