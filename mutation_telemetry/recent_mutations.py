"""Bounded window of recently recorded mutations, used for duplicate detection."""

import threading
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Tuple

from mutation_telemetry.exceptions import TrackerConfigurationError
from mutation_telemetry.models.diff_operations import DiffOperation
from mutation_telemetry.settings import DEFAULT_RING_CAPACITY


@dataclass(frozen=True)
class RecentMutation:
    """Identity of a recorded mutation: redacted workflow hashes plus its operations."""

    hash_before: str
    hash_after: str
    operations: Tuple[DiffOperation, ...]


class RecentMutationRing:
    """Fixed-capacity FIFO buffer of recently recorded mutations.

    Entries leave only through head eviction or `clear()`. The ring's lock is
    exposed so that a caller can hold it across a read and a later append.
    """

    def __init__(self, capacity: int = DEFAULT_RING_CAPACITY) -> None:
        """
        Args:
            capacity: Maximum number of entries kept.

        Raises:
            TrackerConfigurationError: If capacity is not a positive integer.
        """
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise TrackerConfigurationError(f"Ring capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._entries: Deque[RecentMutation] = deque(maxlen=capacity)
        self.lock = threading.RLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, entry: RecentMutation) -> None:
        """Insert at the tail; the deque drops the head once over capacity."""
        with self.lock:
            self._entries.append(entry)

    def clear(self) -> None:
        with self.lock:
            self._entries.clear()

    def size(self) -> int:
        with self.lock:
            return len(self._entries)

    def snapshot(self) -> Tuple[RecentMutation, ...]:
        """Return the current entries, oldest first, as an immutable copy."""
        with self.lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[RecentMutation]:
        return iter(self.snapshot())
