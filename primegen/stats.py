# primegen/stats.py
# How many candidates a run drew per prime, against the prime-number-theorem estimate.
from __future__ import annotations
import math
from typing import Dict, Iterable

import numpy as np

from .search import PrimeResult

def expected_attempts(bit_length: int) -> float:
    """Mean uniform draws below 2**bit_length per prime: ln(2**bit_length)."""
    return bit_length * math.log(2)

def summarize_attempts(results: Iterable[PrimeResult], bit_length: int) -> Dict[str, float]:
    a = np.array([r.attempts for r in results], dtype=float)
    if a.size == 0:
        raise ValueError("no results to summarize")
    return {
        "count": int(a.size),
        "mean": float(a.mean()),
        "median": float(np.median(a)),
        "p90": float(np.percentile(a, 90)),
        "max": int(a.max()),
        "total": int(a.sum()),
        "expected": expected_attempts(bit_length),
    }
