"""Every-Nth-tick filter bounding animation update cost."""

from __future__ import annotations


def should_advance(counter: int, skip: int) -> tuple[bool, int]:
    """Pure form: returns (accepted, incremented counter)."""
    if skip < 1:
        raise ValueError(f"frame skip must be >= 1, got {skip}")
    counter += 1
    return counter % skip == 0, counter


class FrameGate:
    def __init__(self, skip: int = 1):
        if skip < 1:
            raise ValueError(f"frame skip must be >= 1, got {skip}")
        self.skip = skip
        self.counter = 0

    def should_advance(self) -> bool:
        """Count this tick. True when the tick is accepted."""
        accepted, self.counter = should_advance(self.counter, self.skip)
        return accepted
