"""Object pool for short-lived game entities.

Pipes and power-ups are recycled instead of being created and dropped
every few seconds. A pool owns two disjoint lists: ``free`` (reset,
waiting) and ``active`` (in play). Every instance lives in exactly one.
"""

from typing import Callable, Generic, List, Optional, Tuple, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """Fixed-capacity recycler with lenient growth.

    When ``free`` runs dry, ``acquire`` builds a new instance with the
    factory instead of failing. Each growth is logged, counted in
    ``overflow_count`` and reported through ``on_overflow`` so the
    pool size can be tuned.

    Args:
        factory: Builds a fresh, inactive instance
        reset: Restores an instance to its inactive state
        initial_size: Instances allocated up front
        name: Label used in logs
        on_overflow: Called with the pool after each growth
    """

    def __init__(
        self,
        factory: Callable[[], T],
        reset: Callable[[T], None],
        initial_size: int = 10,
        name: str = "pool",
        on_overflow: Optional[Callable[["ObjectPool[T]"], None]] = None,
    ) -> None:
        self._factory = factory
        self._reset = reset
        self._free: List[T] = [factory() for _ in range(initial_size)]
        self._active: List[T] = []
        self._capacity = initial_size
        self._overflow_count = 0
        self.name = name
        self.on_overflow = on_overflow

    @property
    def active(self) -> Tuple[T, ...]:
        """Instances in play, in acquisition order."""
        return tuple(self._active)

    @property
    def active_count(self) -> int:
        return len(self._active)

    @property
    def free_count(self) -> int:
        return len(self._free)

    @property
    def size(self) -> int:
        """Total instances owned by the pool."""
        return len(self._free) + len(self._active)

    @property
    def capacity(self) -> int:
        """Instances allocated up front."""
        return self._capacity

    @property
    def overflow_count(self) -> int:
        """Instances created after the free list ran out."""
        return self._overflow_count

    def acquire(self) -> T:
        """Take an instance out of the free list (or build one)."""
        if self._free:
            obj = self._free.pop()
            self._active.append(obj)
            return obj

        obj = self._factory()
        self._active.append(obj)
        self._overflow_count += 1
        logger.warning(
            f"Pool '{self.name}' exhausted, grew to {self.size} "
            f"(capacity {self._capacity})"
        )
        if self.on_overflow:
            self.on_overflow(self)
        return obj

    def release(self, obj: T) -> None:
        """Return an active instance to the free list.

        Releasing something that is not active (already released, or
        never from this pool) does nothing.
        """
        index = self._index_of(obj)
        if index is None:
            logger.debug(f"Pool '{self.name}': ignored release of inactive object")
            return
        del self._active[index]
        self._reset(obj)
        self._free.append(obj)

    def release_all_active(self) -> None:
        """Release every active instance."""
        for obj in self._active:
            self._reset(obj)
            self._free.append(obj)
        self._active.clear()

    def __contains__(self, obj: object) -> bool:
        return self._index_of(obj) is not None

    def __len__(self) -> int:
        return len(self._active)

    def _index_of(self, obj: object) -> Optional[int]:
        # Identity, not equality: reset instances compare equal
        for i, candidate in enumerate(self._active):
            if candidate is obj:
                return i
        return None
