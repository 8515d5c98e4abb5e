"""Public package surface for the xorshift128+ generator."""

from .prng import XorShift128Plus, seed
from .stream import StreamConfig, bucket_counts, run_stream

__all__ = [
    "StreamConfig",
    "XorShift128Plus",
    "bucket_counts",
    "run_stream",
    "seed",
]
