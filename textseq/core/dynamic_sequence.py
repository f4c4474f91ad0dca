"""Resizable text container with one-slot growth."""

from __future__ import annotations

from collections.abc import Sequence

from textseq.utils.config import DEFAULT_CAPACITY
from textseq.utils.logging import get_logger
from textseq.utils.validation import is_present

_LOGGER = get_logger("core")


class DynamicSequence:
    """Append-only array of text slots backed by a fixed-length list.

    The backing list is reallocated one slot larger whenever an insert would
    overflow it; it never shrinks. Invalid input never raises: lookups and
    removals answer with ``None`` or ``-1`` and inserts of empty text are
    ignored.

    Instances are not thread-safe. Callers sharing one across threads must
    serialize ``insert``, ``remove``, ``delete`` and ``from_slice``.
    """

    __slots__ = ("_storage", "_length")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            capacity = DEFAULT_CAPACITY
        self._storage: list[str | None] = [None] * capacity
        self._length = 0

    @classmethod
    def new_default(cls) -> DynamicSequence:
        return cls(DEFAULT_CAPACITY)

    @classmethod
    def from_slice(cls, data: Sequence[str | None] | None) -> DynamicSequence:
        """Adopt ``data`` as the backing storage without copying it.

        Ownership of the list passes to the container: writes made through
        either reference are visible through the other until the first growth
        reallocates storage. Every slot of ``data`` counts as occupied, holes
        included. Empty or ``None`` input yields a default container.
        """
        if not data:
            return cls.new_default()
        instance = cls.__new__(cls)
        instance._storage = data if isinstance(data, list) else list(data)
        instance._length = len(instance._storage)
        return instance

    @property
    def capacity(self) -> int:
        return len(self._storage)

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def contains(self, target: str | None) -> bool:
        if not is_present(target):
            return False
        for idx in range(self._length):
            if self._storage[idx] == target:
                return True
        return False

    def get(self, index: int) -> str | None:
        """Return the slot at ``index``.

        Bounds are checked against capacity, not length, so an index past the
        occupied prefix but inside the allocation returns that slot's content
        (normally ``None``).
        """
        if 0 <= index < len(self._storage):
            return self._storage[index]
        return None

    def remove(self, index: int) -> str | None:
        """Remove the slot at ``index`` and close the gap.

        Elements after ``index`` shift left by one and the previously last
        occupied slot is cleared. Returns the removed value, or ``None`` when
        the container is empty or ``index`` is outside ``[0, capacity)``.
        """
        if self._length == 0 or not 0 <= index < len(self._storage):
            _LOGGER.debug(
                "Rejected remove(%s): length=%d capacity=%d",
                index,
                self._length,
                len(self._storage),
            )
            return None

        storage = self._storage
        removed = storage[index]
        storage[index] = None
        for idx in range(index, self._length - 1):
            storage[idx] = storage[idx + 1]
        storage[self._length - 1] = None
        self._length -= 1
        return removed

    def delete(self, index: int) -> None:
        self.remove(index)

    def _resize(self) -> None:
        # Growth is exactly one slot per overflow; the list is reallocated.
        grown: list[str | None] = [None] * (len(self._storage) + 1)
        for idx, value in enumerate(self._storage):
            grown[idx] = value
        self._storage = grown
        _LOGGER.debug("Grew storage to capacity %d", len(grown))

    def insert(self, value: str | None) -> None:
        """Append ``value`` after the occupied prefix; empty text is ignored."""
        if not is_present(value):
            _LOGGER.debug("Ignored insert of empty value %r", value)
            return
        if self._length == len(self._storage):
            self._resize()
        self._storage[self._length] = value
        self._length += 1

    def index_of(self, value: str | None) -> int:
        if not is_present(value):
            return -1
        for idx in range(self._length):
            if self._storage[idx] == value:
                return idx
        return -1

    def usage(self) -> float:
        """Percentage of capacity in use, rounded to two decimals.

        Uses the built-in ``round`` (half-to-even on the float result).
        """
        return round(self._length / len(self._storage) * 100, 2)

    def to_list(self) -> list[str | None]:
        return self._storage[: self._length]

    def to_display_string(self) -> str:
        return "[" + ", ".join(str(self._storage[idx]) for idx in range(self._length)) + "]"

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        return f"DynamicSequence({self.to_display_string()}, capacity={self.capacity})"
