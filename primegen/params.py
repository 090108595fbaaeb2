from __future__ import annotations
from typing import Optional

from .errors import ParameterError

MIN_BITS = 32

def check_bits_count(bits: int, count: int,
                     max_bits: Optional[int] = None,
                     max_count: Optional[int] = None) -> None:
    """Raise ParameterError unless bits is a multiple of 8, >= 32, and count >= 1."""
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise ParameterError("bits must be an integer")
    if isinstance(count, bool) or not isinstance(count, int):
        raise ParameterError("count must be an integer")
    if bits % 8 != 0 or bits < MIN_BITS:
        raise ParameterError(f"bits must be a multiple of 8 and at least {MIN_BITS}")
    if count < 1:
        raise ParameterError("count must be at least 1")
    if max_bits is not None and bits > max_bits:
        raise ParameterError(f"bits is capped at {max_bits}")
    if max_count is not None and count > max_count:
        raise ParameterError(f"count is capped at {max_count}")
