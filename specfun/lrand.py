"""Wichmann-Hill three-generator pseudorandom integers."""

from __future__ import annotations

# (multiplier, modulus, quotient, remainder) for Schrage's method.
_GENERATORS = (
    (171, 30269, 177, 2),
    (172, 30307, 176, 35),
    (170, 30323, 178, 63),
)


def _step(state: int, multiplier: int, modulus: int, q: int, r: int) -> int:
    hi, lo = divmod(state, q)
    state = multiplier * lo - r * hi
    if state < 0:
        state += modulus
    return state


def _to_int32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


class WichmannHill:
    """Infinite iterator of integers from three congruential generators.

    Each value is the product of the three generator states reduced to a
    signed 32-bit integer. The period is about 6.95e12.
    """

    def __init__(self, sx=1, sy=10000, sz=3000):
        seeds = (sx, sy, sz)
        for seed, (_, modulus, _, _) in zip(seeds, _GENERATORS):
            if not 0 < seed < modulus:
                raise ValueError(f"seed {seed} must lie in 1..{modulus - 1}")
        self._state = list(seeds)

    @property
    def state(self) -> tuple[int, int, int]:
        """Current states of the three generators."""
        return tuple(self._state)

    def __iter__(self):
        return self

    def __next__(self) -> int:
        self._state = [
            _step(s, *params) for s, params in zip(self._state, _GENERATORS)
        ]
        sx, sy, sz = self._state
        return _to_int32(sx * sy * sz)


_default = WichmannHill()


def lrand() -> int:
    """Next value from the shared default generator."""
    return next(_default)