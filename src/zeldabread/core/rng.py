from __future__ import annotations

import random
from dataclasses import dataclass
from typing import MutableSequence, Optional


@dataclass
class RNG:
    """
    Deterministic-friendly RNG wrapper around random.Random.

    Generation and movement code receive one of these (or a plain
    random.Random, which offers the same methods) instead of reaching for the
    global random module, so a fixed seed reproduces a whole dungeon.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def random(self) -> float:
        """Return the next random float in the range [0.0, 1.0)."""
        return self._rng.random()

    def randrange(self, stop: int) -> int:
        """Return a random integer N such that 0 <= N < stop."""
        return self._rng.randrange(stop)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self._rng.randrange(len(seq))]

    def shuffle(self, seq: MutableSequence) -> None:
        """Shuffle a mutable sequence in place."""
        self._rng.shuffle(seq)

    def state(self):
        """Return the internal PRNG state for debugging."""
        return self._rng.getstate()

    def set_state(self, state) -> None:
        """Restore the internal PRNG state."""
        self._rng.setstate(state)
