from __future__ import annotations

import json
import os
import sys
from typing import Any, Callable, IO, Optional, TypeVar

from .exceptions import SerializationError

T = TypeVar("T")

INDENT = 2
FILE_MODE = 0o644


def _default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(value: Any) -> str:
    try:
        return json.dumps(value, indent=INDENT, ensure_ascii=False, allow_nan=False, default=_default)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot encode value as JSON: {e}") from e


def write_json(value: Any, stream: Optional[IO[str]] = None) -> None:
    """Write `value` as indented JSON to `stream` (stdout by default)."""
    text = dumps(value)
    out = stream if stream is not None else sys.stdout
    out.write(text)
    out.write("\n")
    out.flush()


def write_json_file(path: str, value: Any) -> None:
    """
    Write `value` as indented JSON to `path` with mode 0644.

    Raises SerializationError when the value cannot be encoded; file-system
    errors propagate as OSError.
    """
    text = dumps(value)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(text)
    # O_CREAT mode is masked by umask and ignored for existing files
    os.chmod(path, FILE_MODE)


def read_json_file(path: str, decode: Optional[Callable[[Any], T]] = None) -> Any:
    """
    Read JSON from `path`.

    With `decode`, the parsed value is passed through it to build the caller's
    shape, e.g. `read_json_file(p, Headline.list_from_json)`.
    """
    with open(path, "rb") as f:
        raw = f.read()
    try:
        data = json.loads(raw.decode("utf-8"))
    except ValueError as e:
        # UnicodeDecodeError is a ValueError
        raise SerializationError(f"invalid JSON in {path}: {e}") from e
    if decode is None:
        return data
    try:
        return decode(data)
    except (TypeError, ValueError, KeyError, AttributeError) as e:
        raise SerializationError(f"JSON in {path} does not match the expected shape: {e}") from e
