import time
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The slice of random.Random the engine draws from - any random.Random satisfies it"""

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...

    def choice(self, seq: Sequence[T]) -> T: ...


class LcgRandom:
    """Seedable linear congruential generator used as the engine's default random source.

    seed = (seed * 1664525 + 1013904223) mod 2^32
    """

    def __init__(self, seed: Optional[int] = None):
        # Allow deterministic seeding for tests; default to time-based if not provided
        self.seed = (seed if seed is not None else int(time.time())) & 0xFFFFFFFF

    def advance(self) -> int:
        """Advance the LCG and return the new 32-bit seed."""
        self.seed = (self.seed * 1664525 + 1013904223) & 0xFFFFFFFF
        return self.seed

    def rand16(self) -> int:
        """Advance and return the upper 16 bits (0..65535)."""
        return (self.advance() >> 16) & 0xFFFF

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return self.advance() / 0x100000000

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.random()

    def choice_index(self, count: int) -> int:
        """Return a random index in range [0, count) using rand16 modulo."""
        if count <= 0:
            raise IndexError("Cannot choose from an empty sequence")
        return self.rand16() % count

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.choice_index(len(seq))]
