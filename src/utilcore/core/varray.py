# topmark:header:start
#
#   project      : UtilCore
#   file         : varray.py
#   file_relpath : src/utilcore/core/varray.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Growable integer sequence with an explicit resize policy.

`IntVarray` accumulates an unbounded number of signed 64-bit integers without
reallocating on every append. The growth policy is chosen per instance:

- ``growth_increment <= 1``: capacity doubles (or becomes 1 when empty).
- ``growth_increment > 1``: capacity grows by exactly ``growth_increment`` slots,
  which lets callers that know the expected size get away with one allocation.

Storage is a preallocated `array.array`; slots past `length` are zero-filled and
never exposed.
"""

from __future__ import annotations

import sys
from array import array
from typing import TYPE_CHECKING, ClassVar, Final

from utilcore.config.logging import get_logger
from utilcore.core.errors import AllocationError, CapacityOverflowError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from utilcore.config.logging import UtilcoreLogger

logger: UtilcoreLogger = get_logger(__name__)

TYPECODE: Final[str] = "q"


class IntVarray:
    """Amortized-growth mutable sequence of integers.

    Args:
        growth_increment (int): Resize policy; see the module docstring.

    Attributes:
        max_capacity (int): Largest number of slots the platform can address.
    """

    max_capacity: ClassVar[int] = sys.maxsize // array(TYPECODE).itemsize

    def __init__(self, growth_increment: int = 0) -> None:
        self._growth_increment: int = growth_increment
        self._length: int = 0
        self._data: array[int] = array(TYPECODE)

    @property
    def length(self) -> int:
        """Number of logical elements."""
        return self._length

    @property
    def capacity(self) -> int:
        """Number of allocated element slots."""
        return len(self._data)

    @property
    def growth_increment(self) -> int:
        """Resize policy parameter."""
        return self._growth_increment

    def _next_capacity(self) -> int:
        capacity = self.capacity
        if self._growth_increment <= 1:
            new_capacity = capacity * 2 if capacity else 1
        else:
            new_capacity = capacity + self._growth_increment
        if new_capacity > self.max_capacity:
            logger.fatal(
                "Cannot grow integer sequence beyond %d slots (requested %d)",
                self.max_capacity,
                new_capacity,
            )
            raise CapacityOverflowError(
                f"Capacity {new_capacity} exceeds maximum addressable size {self.max_capacity}"
            )
        return new_capacity

    def _grow(self) -> None:
        new_capacity = self._next_capacity()
        extra = new_capacity - self.capacity
        try:
            self._data.frombytes(bytes(extra * self._data.itemsize))
        except MemoryError as exc:
            logger.fatal("Allocation of %d integer slots failed", new_capacity)
            raise AllocationError(f"Cannot allocate {new_capacity} integer slots") from exc
        logger.trace("Grew integer sequence to %d slots", new_capacity)

    def append(self, value: int) -> None:
        """Append ``value``, growing storage first when it is full.

        Args:
            value (int): Integer to store; must fit in a signed 64-bit slot.

        Raises:
            CapacityOverflowError: If growing would exceed `max_capacity`.
            AllocationError: If the storage could not be allocated.
            OverflowError: If ``value`` does not fit in 64 bits.
        """
        if self._length == self.capacity:
            self._grow()
        self._data[self._length] = value
        self._length += 1

    def extend(self, values: Iterable[int]) -> None:
        """Append every value of ``values`` in order."""
        for value in values:
            self.append(value)

    def release(self) -> None:
        """Free the storage and reset length, capacity and growth increment.

        Safe to call repeatedly.
        """
        self._data = array(TYPECODE)
        self._length = 0
        self._growth_increment = 0

    def tolist(self) -> list[int]:
        """Return the logical elements as a new list."""
        return self._data[: self._length].tolist()

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> int:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("IntVarray index out of range")
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        for i in range(self._length):
            yield self._data[i]

    def __repr__(self) -> str:
        return (
            f"IntVarray(length={self._length}, capacity={self.capacity}, "
            f"growth_increment={self._growth_increment})"
        )
