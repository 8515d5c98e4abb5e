# xorshift128+ PRNG for reproducible float streams (not for security use)
# Reference: Vigna, "Further scramblings of Marsaglia's xorshift generators"
import logging
from dataclasses import dataclass

from .mixing import MASK64, splitmix64, to_unit_float, u64_from_bytes

logger = logging.getLogger(__name__)

MAX_U32 = (1 << 32) - 1


def _check_int(value: int, upper: int, label: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{label} must be an int, received {type(value).__name__}.")
    if not 0 <= value <= upper:
        raise ValueError(f"{label} must be within 0..{upper:#x}, received {value}.")


@dataclass
class XorShift128Plus:
    """Two 64-bit state words; never both zero."""

    s0: int
    s1: int

    def __post_init__(self) -> None:
        _check_int(self.s0, MASK64, "state word s0")
        _check_int(self.s1, MASK64, "state word s1")
        if self.s0 == 0 and self.s1 == 0:
            raise ValueError("All-zero state is a fixed point of xorshift128+.")

    @classmethod
    def from_u32(cls, seed: int) -> "XorShift128Plus":
        """Seed from an unsigned 32-bit integer.

        Only 32 bits of entropy reach the 128-bit state, so the reachable
        streams are a tiny subset of the full period.
        """
        _check_int(seed, MAX_U32, "u32 seed")
        return cls._expand(seed)

    @classmethod
    def from_u64(cls, seed: int) -> "XorShift128Plus":
        """Seed from an unsigned 64-bit integer.

        Uses the same expansion as :meth:`from_u32`, so both agree for seeds
        below ``2**32``.
        """
        _check_int(seed, MASK64, "u64 seed")
        return cls._expand(seed)

    @classmethod
    def from_bytes(cls, data: bytes) -> "XorShift128Plus":
        """Load the state verbatim from 16 bytes (two little-endian words)."""
        data = bytes(data)
        if len(data) != 16:
            raise ValueError(f"Expected 16 seed bytes, received {len(data)}.")
        return cls(u64_from_bytes(data[:8]), u64_from_bytes(data[8:]))

    @classmethod
    def _expand(cls, seed: int) -> "XorShift128Plus":
        # splitmix64 is bijective and splitmix64(0) != 0, so s1 is non-zero
        # whenever s0 is zero.
        s0 = splitmix64(seed)
        s1 = splitmix64(s0)
        assert (s0, s1) != (0, 0), "seed expansion produced the all-zero state"
        logger.debug("Seed %#x expanded to s0=%#018x s1=%#018x", seed, s0, s1)
        return cls(s0, s1)

    def next(self) -> float:
        """Advance one step and return a sample in [0, 1)."""
        x = self.s0
        y = self.s1
        self.s0 = y
        x ^= (x << 23) & MASK64
        x ^= x >> 17
        x ^= y ^ (y >> 26)
        self.s1 = x
        return to_unit_float((self.s0 + self.s1) & MASK64)

    def __iter__(self) -> "XorShift128Plus":
        return self

    def __next__(self) -> float:
        return self.next()


def seed(value: int) -> XorShift128Plus:
    """Build a generator from a 32-bit seed."""
    return XorShift128Plus.from_u32(value)
