# Reading uploaded files as text before they are handed to the analyzers.

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = frozenset({
    ".txt", ".md", ".json", ".html", ".htm", ".css",
    ".js", ".jsx", ".ts", ".tsx", ".py", ".java", ".c", ".h", ".cpp", ".php", ".rb", ".go",
})

_SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


class UnsupportedFileTypeError(ValueError):
    """Raised when a file's suffix is not one the detector reads."""


def is_supported_file(path: str | Path) -> bool:
    return Path(path).suffix.lower() in SUPPORTED_SUFFIXES


def format_file_size(size: int) -> str:
    """Human-readable size, e.g. ``"0 Bytes"`` or ``"1.5 KB"``."""
    if size <= 0:
        return "0 Bytes"
    exponent = 0
    while size >= 1024 ** (exponent + 1) and exponent < len(_SIZE_UNITS) - 1:
        exponent += 1
    value = round(size / 1024**exponent, 2)
    return f"{value:g} {_SIZE_UNITS[exponent]}"


def read_content_file(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a supported file as text.

    Raises:
        FileNotFoundError: ``path`` does not exist.
        UnsupportedFileTypeError: the suffix is not in ``SUPPORTED_SUFFIXES``.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"No such file: {file_path}")
    if not is_supported_file(file_path):
        raise UnsupportedFileTypeError(f"Unsupported file type {file_path.suffix!r} for {file_path.name}")

    content = file_path.read_text(encoding=encoding)
    logger.info(f"Loaded {file_path.name} ({format_file_size(file_path.stat().st_size)})")
    return content
