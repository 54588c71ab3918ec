"""
Base abstraction for text storage.

**Conceptual**: A Table never touches the filesystem directly. It asks a
TextStore to read or write a whole document, and to create the folders a file
will live in. Keeping this behind a protocol means the table logic can be
tested with a mock store, and a different backend (an archive, a remote
bucket) can be plugged in without touching the table code.

**Why protocols over inheritance?**
  - Any object with the three methods is a TextStore; no base class needed.
  - Tests can pass a `unittest.mock.Mock` with a `side_effect` to simulate
    permission errors or missing files.

**Error contract**:
All TextStore implementations MUST signal failure by raising `OSError` (or a
subclass such as FileNotFoundError / PermissionError). Undecodable bytes may
raise UnicodeDecodeError. Table catches exactly these and reports failure as
a False result.
"""

from typing import Protocol


class TextStore(Protocol):
    """
    Protocol for whole-document text storage.

    **Example usage**:
        >>> from csvgrid.storage.local import LocalTextStore
        >>> store = LocalTextStore()
        >>> store.ensure_directory("out/data.csv")
        >>> store.write_text("out/data.csv", "a,b\\n1,2")
        >>> store.read_text("out/data.csv")
        'a,b\\n1,2'
    """

    def read_text(self, path: str) -> str:
        """
        Read a whole document.

        Args:
            path: Location of the document.

        Returns:
            The document text, with newlines exactly as stored.

        Raises:
            FileNotFoundError: If nothing exists at path.
            PermissionError: If the document cannot be read.
            OSError: For any other read failure.
        """
        ...

    def write_text(self, path: str, text: str) -> None:
        """
        Write a whole document, replacing any existing content.

        Raises:
            OSError: If the document cannot be written.
        """
        ...

    def ensure_directory(self, path: str) -> None:
        """
        Create any missing parent directories of the file at path.

        Raises:
            OSError: If a directory cannot be created.
        """
        ...
