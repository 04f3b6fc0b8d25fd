"""TextBuffer for O(n) text accumulation.

Used by the standby scanner to collect the decoded body of a quoted
identifier. Appends to a list, joins once at the end: O(n) total vs O(n²)
for repeated string concatenation.

Capacity is tracked explicitly and grown through the owning allocator, so
an embedding system can attribute the buffer to an enclosing scope.

Thread Safety:
TextBuffer instances belong to one scan context.
No shared mutable state.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pgscan.errors import AllocationError

if TYPE_CHECKING:
    from pgscan.allocator import Allocator

# Initial capacity for quoted-identifier accumulators (characters)
INITIAL_CAPACITY = 64


class TextBuffer:
    """Growable text accumulator owned by an allocator.

    Usage:
            >>> from pgscan.allocator import HeapAllocator
            >>> buf = HeapAllocator().allocate()
            >>> buf.append("standby").append('"').append("1")
            >>> buf.build()
            'standby"1'

    """

    __slots__ = ("_allocator", "_capacity", "_length", "_parts", "_released")

    def __init__(self, allocator: Allocator, capacity: int = INITIAL_CAPACITY) -> None:
        """Initialize an empty buffer.

        Args:
            allocator: Allocator that grows and releases this buffer
            capacity: Reserved capacity in characters
        """
        self._allocator = allocator
        self._capacity = capacity
        self._length = 0
        self._parts: list[str] = []
        self._released = False

    def append(self, s: str) -> TextBuffer:
        """Append a string to the buffer.

        Grows the capacity through the allocator when needed.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining

        Raises:
            AllocationError: If the buffer has been released
        """
        if self._released:
            raise AllocationError("append to released buffer")
        if not s:
            return self
        needed = self._length + len(s)
        if needed > self._capacity:
            self._capacity = self._allocator.grow(self, needed)
        self._parts.append(s)
        self._length = needed
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def clear(self) -> TextBuffer:
        """Drop accumulated text, keeping the reserved capacity."""
        self._parts.clear()
        self._length = 0
        return self

    def mark_released(self) -> None:
        """Drop contents and refuse further writes. Called by allocators."""
        self._parts.clear()
        self._length = 0
        self._released = True

    @property
    def capacity(self) -> int:
        """Reserved capacity in characters."""
        return self._capacity

    @property
    def released(self) -> bool:
        return self._released

    def __len__(self) -> int:
        """Return number of accumulated characters."""
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0
