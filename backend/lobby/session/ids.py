from itertools import count


class IdAllocator:
    """Monotonically increasing integer ids starting at 0, never reused."""

    def __init__(self) -> None:
        self._counter = count()

    def next_id(self) -> int:
        return next(self._counter)
