"""Reading whole files into memory."""

from __future__ import annotations

import os
from pathlib import Path


def read_file_to_bytes(filename: str | os.PathLike[str]) -> bytes:
    """Return the whole content of a file; an empty file is an error."""
    data = Path(filename).read_bytes()
    if not data:
        raise ValueError(f"file is empty: {filename}")
    return data


def read_file_to_string(filename: str | os.PathLike[str]) -> str:
    """Return the whole content of a file as UTF-8 text; an empty file is an error."""
    return read_file_to_bytes(filename).decode("utf-8")