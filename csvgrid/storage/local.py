"""
Local filesystem TextStore.
"""

from pathlib import Path

from csvgrid.config.settings import DEFAULT_ENCODING


class LocalTextStore:
    """
    Reads and writes documents on the local filesystem.

    Files are opened with newline="" so "\\n" is written verbatim on every
    platform and "\\r\\n" in existing files reaches the tokenizer unchanged.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        """
        Args:
            encoding: Text encoding for reads and writes (default "utf-8").
        """
        self.encoding = encoding

    def read_text(self, path: Path | str) -> str:
        with open(Path(path), "r", encoding=self.encoding, newline="") as f:
            return f.read()

    def write_text(self, path: Path | str, text: str) -> None:
        with open(Path(path), "w", encoding=self.encoding, newline="") as f:
            f.write(text)

    def ensure_directory(self, path: Path | str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)

    def __repr__(self) -> str:
        return f"LocalTextStore(encoding={self.encoding!r})"
