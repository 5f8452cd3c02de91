"""
Flat-file persistence for the phone collection.

The whole collection is stored as a single JSON array.  Every read
loads the complete document and every write replaces it, so the cost
of an operation grows with the size of the collection.  This module
provides:

* ``JSONFilePhoneStore`` backed by a file on disk (the file must
  already exist; it is never created implicitly by ``load``);
* ``InMemoryPhoneStore`` holding the serialized document in memory,
  used as a drop-in substitute in tests.

Both expose ``locked()``, a context manager holding the store's writer
lock, so callers can run a read-modify-write cycle without another
request interleaving its own.  Locking is per process only.
"""

from __future__ import annotations

import json
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

Phone = Dict[str, Any]


class StoreError(Exception):
    """Base class for persistence failures."""


class StoreReadError(StoreError):
    """The collection could not be read (missing file, I/O error)."""


class StoreParseError(StoreError):
    """The stored document is not valid JSON or not a JSON array."""


class StoreWriteError(StoreError):
    """The collection could not be written."""


def serialize(phones: List[Phone]) -> bytes:
    """Encode a collection the way it is written to disk."""
    return (json.dumps(phones, ensure_ascii=False, indent=2) + "\n").encode("utf-8")


def parse(data: bytes) -> List[Phone]:
    """Decode a stored document, insisting on a top-level array."""
    try:
        phones = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise StoreParseError(f"Invalid JSON: {exc}") from exc
    if not isinstance(phones, list):
        raise StoreParseError("Phone collection must be a JSON array")
    return phones


class PhoneStore:
    """Interface shared by the store implementations."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the writer lock for the duration of the block."""
        with self._lock:
            yield

    def load(self) -> List[Phone]:
        raise NotImplementedError

    def save(self, phones: List[Phone]) -> None:
        raise NotImplementedError

    def replace_raw(self, data: bytes) -> None:
        raise NotImplementedError


class JSONFilePhoneStore(PhoneStore):
    """Phone collection stored as a JSON file."""

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)

    def load(self) -> List[Phone]:
        if not self.path.exists():
            raise StoreReadError("Phones file not found")
        try:
            data = self.path.read_bytes()
        except OSError as exc:
            raise StoreReadError(f"Failed to read {self.path}: {exc}") from exc
        return parse(data)

    def save(self, phones: List[Phone]) -> None:
        try:
            self.path.write_bytes(serialize(phones))
        except OSError as exc:
            raise StoreWriteError(f"Failed to write {self.path}: {exc}") from exc

    def replace_raw(self, data: bytes) -> None:
        # No validation: the bytes are written as-is and checked by the caller.
        try:
            self.path.write_bytes(data)
        except OSError as exc:
            raise StoreWriteError(f"Failed to replace {self.path}: {exc}") from exc


class InMemoryPhoneStore(PhoneStore):
    """Keeps the serialized document in memory.

    Storing bytes rather than Python objects keeps the behaviour aligned
    with ``JSONFilePhoneStore``: records are copied on every load and a
    bad ``replace_raw`` surfaces as a parse error on the next load.
    """

    def __init__(
        self,
        phones: Optional[List[Phone]] = None,
        raw: Optional[bytes] = None,
        missing: bool = False,
    ) -> None:
        super().__init__()
        if missing:
            self.raw: Optional[bytes] = None
        elif raw is not None:
            self.raw = raw
        else:
            self.raw = serialize(phones or [])

    def load(self) -> List[Phone]:
        if self.raw is None:
            raise StoreReadError("Phones file not found")
        return parse(self.raw)

    def save(self, phones: List[Phone]) -> None:
        self.raw = serialize(phones)

    def replace_raw(self, data: bytes) -> None:
        self.raw = bytes(data)
