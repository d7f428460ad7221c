"""File-backed document and noise-word sources."""

from collections.abc import Callable
from pathlib import Path


class SourceUnavailable(Exception):
    """A document list, noise-word list or document cannot be read."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Cannot read source: {path}")
        self.path = path


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise SourceUnavailable(path) from err


def list_documents(docs_file: Path) -> list[str]:
    """Whitespace-separated document names, in file order."""
    return _read_text(docs_file).split()


def list_noise_words(noise_words_file: Path) -> set[str]:
    return set(_read_text(noise_words_file).split())


def line_reader(base_dir: Path) -> Callable[[str], list[str]]:
    """Return a reader that loads a document's lines; relative names use base_dir."""

    def read_lines(document: str) -> list[str]:
        return _read_text(base_dir / document).splitlines()

    return read_lines
