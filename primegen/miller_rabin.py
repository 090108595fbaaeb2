# primegen/miller_rabin.py
# Miller-Rabin probable-prime test with random witnesses.
# A prime is never rejected; a composite survives k rounds with probability <= 4**-k.
from __future__ import annotations
from typing import Optional, Tuple

from .sampler import draw_witness

try:
    import gmpy2
    HAVE_GMPY2 = True
    def _powmod(a, e, n): return int(gmpy2.powmod(a, e, n))
except Exception:
    HAVE_GMPY2 = False
    def _powmod(a, e, n): return pow(a, e, n)

ROUNDS = 10

def decompose(n: int) -> Tuple[int, int]:
    """Return (r, d) with n-1 == 2**r * d and d odd. n must be odd and >= 3."""
    if n < 3 or n % 2 == 0:
        raise ValueError("n must be odd and >= 3")
    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2; r += 1
    return r, d

def _round_passes(a: int, r: int, d: int, n: int) -> bool:
    x = _powmod(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(r - 1):
        x = _powmod(x, 2, n)
        if x == n - 1:
            return True
    return False

def is_probable_prime(n: int, k: int = ROUNDS, byte_length: Optional[int] = None) -> bool:
    if n < 2: return False
    if n in (2, 3): return True
    if n % 2 == 0: return False
    r, d = decompose(n)
    for _ in range(k):
        a = draw_witness(n, byte_length)
        if not _round_passes(a, r, d, n):
            return False
    return True
