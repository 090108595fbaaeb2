# primegen/sampler.py
# Random candidates and Miller-Rabin witnesses from the OS CSPRNG.
from __future__ import annotations
import secrets

from .errors import EntropyError

MIN_WITNESS_BYTES = 4

def _random_bytes(n: int) -> bytes:
    try:
        return secrets.token_bytes(n)
    except OSError as e:
        raise EntropyError(f"secure random source failed: {e}") from e

def sample_candidate(byte_length: int) -> int:
    """Uniform integer in [0, 256**byte_length), bytes read as unsigned big-endian."""
    if byte_length < 1:
        raise ValueError("byte_length must be >= 1")
    return int.from_bytes(_random_bytes(byte_length), "big")

def draw_witness(n: int, byte_length: int | None = None) -> int:
    """
    Witness a with 2 < a < n-1 for odd n >= 5.
    Raw draws are 4..byte_length bytes wide, reduced mod n, redrawn while out of range.
    """
    if n < 5:
        raise ValueError("witness needs n >= 5")
    if byte_length is None:
        byte_length = (n.bit_length() + 7) // 8
    hi = max(MIN_WITNESS_BYTES, byte_length)
    while True:
        width = MIN_WITNESS_BYTES + secrets.randbelow(hi - MIN_WITNESS_BYTES + 1)
        a = int.from_bytes(_random_bytes(width), "big") % n
        if 2 < a < n - 1:
            return a
