from __future__ import annotations

import itertools
import time


class IdGenerator:
    """Type-prefixed ids, unique for the lifetime of one generator.

    The numeric part starts from the creation timestamp (ms) and only grows,
    so two ids handed out in the same millisecond never collide and new ids
    stay clear of small hand-written seed ids like ``stu-1``.
    """

    def __init__(self, start: int | None = None):
        base = int(time.time() * 1000) if start is None else int(start)
        self._counter = itertools.count(base)

    def next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._counter)}"
