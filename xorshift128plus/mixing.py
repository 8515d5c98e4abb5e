"""64-bit mixing helpers shared by the generator's seeding and output paths."""

MASK64 = (1 << 64) - 1

# 2**-53: one unit in the last place of a double mantissa
_UNIT_53 = 1.0 / 9007199254740992.0


def splitmix64(value: int) -> int:
    """One SplitMix64 round; a bijection on 64-bit words."""
    z = (value + 0x9E3779B97F4A7C15) & MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)


def u64_from_bytes(data: bytes) -> int:
    """Decode eight bytes as a little-endian unsigned word."""
    if len(data) != 8:
        raise ValueError(f"Expected 8 bytes for a 64-bit word, received {len(data)}.")
    return int.from_bytes(data, "little")


def to_unit_float(raw: int) -> float:
    """Scale the high 53 bits of a 64-bit word into [0, 1)."""
    return (raw >> 11) * _UNIT_53
