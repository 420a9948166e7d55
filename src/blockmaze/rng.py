# src/blockmaze/rng.py
# Seeded mulberry32 generator. Same seed -> same stream, forever.

import logging
import time
from dataclasses import dataclass, field
from typing import Optional, Sequence, TypeVar

from .errors import EmptyInput

logger = logging.getLogger(__name__)

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
INCREMENT = 0x6D2B79F5
TWO_32 = 4294967296  # 2^32


def seed_from_time() -> int:
    # Wall-clock milliseconds folded into 32 bits.
    return int(time.time() * 1000) & MASK32


def mulberry32_step(state: int):
    """Advance one step. Returns (new_state, 32-bit output)."""
    state = (state + INCREMENT) & MASK32
    t = state
    t = ((t ^ (t >> 15)) * (t | 1)) & MASK32
    t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & MASK32)) & MASK32
    return state, (t ^ (t >> 14)) & MASK32


@dataclass
class Mulberry32:
    seed: Optional[int] = None
    state: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.seed is None:
            self.seed = seed_from_time()
            logger.info("the random seed: %d", self.seed)
        self.seed &= MASK32
        self.state = self.seed

    def next32(self) -> int:
        self.state, out = mulberry32_step(self.state)
        return out

    def next_float(self) -> float:
        """Float in [0, 1)."""
        return self.next32() / TWO_32

    __call__ = next_float

    def randint(self, bound: int, low: int = 0) -> int:
        """Integer in [low, bound)."""
        return low + int(self.next_float() * (bound - low))

    def sample(self, seq: Sequence[T]) -> T:
        if not seq:
            raise EmptyInput("cannot sample from an empty sequence")
        return seq[self.randint(len(seq))]
