"""Pluggable allocation boundary for pgscan scanners.

Every scan context, every buffer a scanner reserves and every decoded
payload it hands out goes through an Allocator. The default HeapAllocator
leaves everything to the garbage collector; an ArenaAllocator attributes
memory to one enclosing scope and releases it in bulk, on success and
failure paths alike.

Usage:
    >>> from pgscan import ArenaAllocator, tokenize, ScanLanguage
    >>> with ArenaAllocator("syncrep") as arena:
    ...     tokens = tokenize('FIRST 1 ("s1", s2)', ScanLanguage.STANDBY, allocator=arena)
    >>> arena.chars_cloned
    5
    >>> arena.live_buffers, arena.live_contexts
    (0, 0)

Thread Safety:
    HeapAllocator is stateless and may be shared. ArenaAllocator keeps
    counters and live sets; give each concurrent scan its own arena.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pgscan.buffer import INITIAL_CAPACITY, TextBuffer
from pgscan.errors import AllocationError
from pgscan.utils.logger import get_logger

if TYPE_CHECKING:
    from pgscan.lexer.context import ScanContext

logger = get_logger(__name__)


@runtime_checkable
class Allocator(Protocol):
    """Protocol for the memory boundary used by scanners.

    Implementations decide where scanner memory is attributed. Scanners
    never hold memory that was not obtained through these calls.

    """

    def acquire_context(self, context: ScanContext) -> None:
        """Attribute a newly created scan context to this allocator."""
        ...

    def release_context(self, context: ScanContext) -> None:
        """Forget a scan context released by its scanner."""
        ...

    def allocate(self, capacity: int = INITIAL_CAPACITY) -> TextBuffer:
        """Reserve a new, empty text buffer."""
        ...

    def grow(self, buffer: TextBuffer, needed: int) -> int:
        """Grow buffer to hold at least needed characters.

        Returns:
            The new capacity.
        """
        ...

    def clone(self, text: str) -> str:
        """Copy text into memory owned by this allocator (token payloads)."""
        ...

    def release(self, buffer: TextBuffer) -> None:
        """Release a buffer obtained from allocate()."""
        ...


def _grown_capacity(current: int, needed: int) -> int:
    """Double current until it covers needed."""
    capacity = max(current, 1)
    while capacity < needed:
        capacity *= 2
    return capacity


class HeapAllocator:
    """Default allocator backed by the interpreter heap.

    No bookkeeping: contexts and released buffers are simply dropped.

    """

    __slots__ = ()

    def acquire_context(self, context: ScanContext) -> None:
        pass

    def release_context(self, context: ScanContext) -> None:
        pass

    def allocate(self, capacity: int = INITIAL_CAPACITY) -> TextBuffer:
        return TextBuffer(self, capacity)

    def grow(self, buffer: TextBuffer, needed: int) -> int:
        return _grown_capacity(buffer.capacity, needed)

    def clone(self, text: str) -> str:
        return text

    def release(self, buffer: TextBuffer) -> None:
        buffer.mark_released()


class ArenaAllocator:
    """Allocator that attributes scanner memory to one scope.

    Tracks every live scan context and buffer plus the characters reserved
    and cloned, and releases everything at once with release_all(). A
    context released that way is closed, so its scanner refuses further
    tokens. Used as a context manager, release happens on exit whether or
    not an exception escaped, and the arena is closed afterwards.

    Attributes:
        name: Scope name used in log messages
        chars_reserved: Total capacity handed out to buffers (characters)
        chars_cloned: Total characters copied into token payloads
        payloads_cloned: Number of payloads cloned

    """

    __slots__ = (
        "_closed",
        "_contexts",
        "_live",
        "chars_cloned",
        "chars_reserved",
        "name",
        "payloads_cloned",
    )

    def __init__(self, name: str = "scan") -> None:
        self.name = name
        self.chars_reserved = 0
        self.chars_cloned = 0
        self.payloads_cloned = 0
        self._contexts: dict[int, ScanContext] = {}
        self._live: dict[int, TextBuffer] = {}
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise AllocationError(f"arena {self.name!r} is closed")

    def acquire_context(self, context: ScanContext) -> None:
        self._check_open()
        self._contexts[id(context)] = context

    def release_context(self, context: ScanContext) -> None:
        self._contexts.pop(id(context), None)

    def allocate(self, capacity: int = INITIAL_CAPACITY) -> TextBuffer:
        self._check_open()
        buffer = TextBuffer(self, capacity)
        self._live[id(buffer)] = buffer
        self.chars_reserved += capacity
        return buffer

    def grow(self, buffer: TextBuffer, needed: int) -> int:
        self._check_open()
        if id(buffer) not in self._live:
            raise AllocationError("grow of buffer not owned by this arena")
        capacity = _grown_capacity(buffer.capacity, needed)
        self.chars_reserved += capacity - buffer.capacity
        return capacity

    def clone(self, text: str) -> str:
        self._check_open()
        self.chars_cloned += len(text)
        self.payloads_cloned += 1
        return text

    def release(self, buffer: TextBuffer) -> None:
        self._live.pop(id(buffer), None)
        buffer.mark_released()

    def release_all(self) -> int:
        """Release every live scan context, then every live buffer.

        Contexts go first so each one hands its accumulator back before
        the remaining buffers are dropped.

        Returns:
            Number of contexts and buffers that were still live.
        """
        contexts = list(self._contexts.values())
        self._contexts.clear()
        for context in contexts:
            context.release()

        buffers = len(self._live)
        for buffer in self._live.values():
            buffer.mark_released()
        self._live.clear()

        if contexts or buffers:
            logger.debug(
                "Arena %r released %d context(s) and %d buffer(s)",
                self.name,
                len(contexts),
                buffers,
            )
        return len(contexts) + buffers

    def close(self) -> None:
        """Release everything and refuse further allocation."""
        self.release_all()
        self._closed = True

    @property
    def live_contexts(self) -> int:
        """Number of scan contexts acquired and not yet released."""
        return len(self._contexts)

    @property
    def live_buffers(self) -> int:
        """Number of buffers allocated and not yet released."""
        return len(self._live)

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> ArenaAllocator:
        self._check_open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


# Module-level default (stateless, safe to share)
DEFAULT_ALLOCATOR: Allocator = HeapAllocator()


__all__ = [
    "DEFAULT_ALLOCATOR",
    "Allocator",
    "ArenaAllocator",
    "HeapAllocator",
]
