from __future__ import annotations

__all__ = [
    "SequentialCounter",
]


class SequentialCounter:
    """1-based identifier source for output files.

    Incremented once per written document; ``produced`` is the number of
    documents written so far.
    """

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self.value = start

    def increment(self) -> int:
        self.value += 1
        return self.value

    @property
    def produced(self) -> int:
        return self.value - self._start
