"""
Configuration settings for CSV tables.

**Conceptual**: This module provides a strongly-typed configuration object that
loads the table defaults (field separator, comment prefix, quoting, encoding)
from environment variables (via .env files). Settings are validated when they
are constructed, so a bad separator or an unknown encoding is reported at
startup rather than in the middle of a save.

**Why centralized config?**
  - Single source of truth for the dialect every new Table starts with.
  - Easy to test (inject a TableSettings instead of reading the environment).
  - Fail-fast validation (empty separator -> clear error at startup).

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import codecs
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (dev/local environments)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


DEFAULT_FIELD_SEPARATOR = ","
DEFAULT_COMMENT_PREFIX = "#"
DEFAULT_ENCODING = "utf-8"

_TRUE_TOKENS = {"1", "true", "yes"}
_FALSE_TOKENS = {"0", "false", "no", ""}


@dataclass(frozen=True)
class TableSettings:
    """
    Default dialect and text encoding for CSV tables.

    **Conceptual**: A Table copies these values when it is created; after that,
    `Table.load()` replaces the separator and comment prefix with whatever the
    caller passes, so these are only the starting point.

    Attributes:
        field_separator: String between fields on a line (default ",").
                        May be more than one character. Must not be empty.
        comment_prefix: Lines starting with this string are skipped on load
                       (default "#"). An empty prefix disables comments.
        quote_fields: Whether save() quotes every field when the caller does
                     not say otherwise (default False).
        encoding: Text encoding used by the local file store (default "utf-8").
    """
    field_separator: str = DEFAULT_FIELD_SEPARATOR
    comment_prefix: str = DEFAULT_COMMENT_PREFIX
    quote_fields: bool = False
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.field_separator:
            raise ValueError(
                "CSVGRID_FIELD_SEPARATOR must not be empty. "
                "Set it in your .env file or leave it unset to use ','."
            )
        if "\n" in self.field_separator or '"' in self.field_separator:
            raise ValueError(
                f"Field separator {self.field_separator!r} must not contain "
                "a newline or a double quote."
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {self.encoding!r}")

    @classmethod
    def from_env(cls) -> "TableSettings":
        """
        Load table settings from environment variables.

        **Environment variables** (all optional):
          - CSVGRID_FIELD_SEPARATOR: field separator, default ",".
          - CSVGRID_COMMENT_PREFIX: comment line prefix, default "#".
          - CSVGRID_QUOTE_FIELDS: 1/0, true/false or yes/no, default false.
          - CSVGRID_ENCODING: text encoding for files, default "utf-8".

        Returns:
            TableSettings object with values loaded from environment.

        Raises:
            ValueError: If any variable holds an invalid value.

        Usage example:
            >>> # In .env file:
            >>> # CSVGRID_FIELD_SEPARATOR=;
            >>>
            >>> settings = TableSettings.from_env()
            >>> print(settings.field_separator)  # ";"
        """
        quote_str = os.getenv("CSVGRID_QUOTE_FIELDS", "false")
        token = quote_str.strip().lower()
        if token in _TRUE_TOKENS:
            quote_fields = True
        elif token in _FALSE_TOKENS:
            quote_fields = False
        else:
            raise ValueError(
                f"CSVGRID_QUOTE_FIELDS must be true/false (or 1/0, yes/no), got: {quote_str}"
            )

        return cls(
            field_separator=os.getenv("CSVGRID_FIELD_SEPARATOR", DEFAULT_FIELD_SEPARATOR),
            comment_prefix=os.getenv("CSVGRID_COMMENT_PREFIX", DEFAULT_COMMENT_PREFIX),
            quote_fields=quote_fields,
            encoding=os.getenv("CSVGRID_ENCODING", DEFAULT_ENCODING),
        )


# Global settings singleton (lazy-loaded)
_default_settings: TableSettings | None = None


def get_settings() -> TableSettings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached for
    reuse. Tests can bypass this by passing their own TableSettings to Table,
    or call reset_settings() after changing environment variables.

    Returns:
        Global TableSettings singleton.

    Raises:
        ValueError: If the environment holds invalid settings.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = TableSettings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    Returns:
        None (side effect: clears global settings cache).
    """
    global _default_settings
    _default_settings = None
