"""Whole-collection repository interface shared by the storage backends."""

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Generic, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


class Repository(ABC, Generic[RecordT]):
    """Durable storage of one entity collection.

    Callers read the whole collection, mutate it and write it back. Hold
    ``locked()`` across that cycle so concurrent requests in this process do
    not overwrite each other's changes.
    """

    def __init__(self, model: type[RecordT]) -> None:
        self.model = model
        self._lock = threading.RLock()

    @abstractmethod
    def load_all(self) -> list[RecordT]:
        """Return every stored record in insertion order, or [] when unreadable."""

    @abstractmethod
    def save_all(self, items: Sequence[RecordT]) -> None:
        """Persist the given records. Raises StorageError on failure."""

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield
