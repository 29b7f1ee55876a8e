import time
from typing import Iterable, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with random() -> float in [0, 1). random.Random qualifies."""

    def random(self) -> float: ...


class LcgRandom:
    """Seedable linear congruential generator.

    seed = (seed * 1664525 + 1013904223) mod 2^32, the same recurrence the
    handheld battle engines use. Draws are the upper 16 bits scaled to [0, 1).
    """

    def __init__(self, seed: Optional[int] = None):
        # Unseeded generators start from the wall clock
        self.seed = (seed if seed is not None else int(time.time())) & 0xFFFFFFFF

    def advance(self) -> int:
        """Advance the LCG and return the new 32-bit seed."""
        self.seed = (self.seed * 1664525 + 1013904223) & 0xFFFFFFFF
        return self.seed

    def rand16(self) -> int:
        """Advance and return the upper 16 bits (0..65535)."""
        self.advance()
        return (self.seed >> 16) & 0xFFFF

    def random(self) -> float:
        return self.rand16() / 0x10000


class SequenceRandom:
    """Replays scripted draws in order. Raises IndexError once exhausted."""

    def __init__(self, values: Iterable[float]):
        self.values = list(values)
        self.position = 0
        for value in self.values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Scripted draw {value} is outside [0, 1)")

    def random(self) -> float:
        if self.position >= len(self.values):
            raise IndexError("SequenceRandom ran out of scripted draws")
        value = self.values[self.position]
        self.position += 1
        return value

    def remaining(self) -> int:
        return len(self.values) - self.position


def rand_int(source: RandomSource, count: int) -> int:
    """Return floor(random() * count), a uniform integer in [0, count)."""
    if count <= 0:
        return 0
    return min(int(source.random() * count), count - 1)


def choice(source: RandomSource, options: Sequence[T]) -> T:
    if not options:
        raise ValueError("Cannot choose from an empty sequence")
    return options[rand_int(source, len(options))]
