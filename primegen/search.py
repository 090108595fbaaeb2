# primegen/search.py
# Concurrent prime search.
# - One unit of work per requested prime: sample -> quick filter -> Miller-Rabin, until accepted
# - Bounded pool (threads or processes), all units submitted up front
# - The calling thread is the only collector: completion indices are assigned there, in arrival order

from __future__ import annotations
import logging, time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .config import EXECUTORS, Settings
from .errors import SearchExhausted
from .filters import passes_quick_filter
from .miller_rabin import ROUNDS, is_probable_prime
from .params import check_bits_count
from .sampler import sample_candidate

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 5

@dataclass(frozen=True)
class PrimeResult:
    index: int      # 1-based completion order
    value: int
    attempts: int = 0

def find_one_prime(byte_length: int,
                   rounds: int = ROUNDS,
                   max_attempts: Optional[int] = None) -> Tuple[int, int]:
    """
    Draw candidates until one is a probable prime. Returns (value, attempts).
    Unbounded unless max_attempts is given; raises SearchExhausted when that bound is hit.
    """
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        n = sample_candidate(byte_length)
        if not passes_quick_filter(n):
            continue
        if is_probable_prime(n, rounds, byte_length):
            logger.debug("unit accepted candidate after %d attempts", attempts)
            return n, attempts
    raise SearchExhausted(attempts)

class SearchCoordinator:

    def __init__(self,
                 concurrency: int = DEFAULT_CONCURRENCY,
                 executor: str = "process",
                 max_attempts: Optional[int] = None):
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        if executor not in EXECUTORS:
            raise ValueError(f"executor must be one of {EXECUTORS}")
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be >= 1 or None")
        self.concurrency = concurrency
        self.executor = executor
        self.max_attempts = max_attempts

    @classmethod
    def from_settings(cls, settings: Settings) -> "SearchCoordinator":
        return cls(concurrency=settings.concurrency,
                   executor=settings.executor,
                   max_attempts=settings.max_attempts)

    def _pool(self, workers: int):
        if self.executor == "process":
            return ProcessPoolExecutor(max_workers=workers)
        return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="primegen")

    def generate(self, bit_length: int, count: int) -> Iterator[PrimeResult]:
        """Yield count PrimeResults as units finish. Any unit failure aborts the whole run."""
        check_bits_count(bit_length, count)
        return self._collect(bit_length // 8, count)

    def _collect(self, byte_length: int, count: int) -> Iterator[PrimeResult]:
        workers = min(self.concurrency, count)
        logger.info("searching %d prime(s) of %d bits with %d %s worker(s)",
                    count, byte_length * 8, workers, self.executor)
        t0 = time.perf_counter()
        pool = self._pool(workers)
        futures = [pool.submit(find_one_prime, byte_length, ROUNDS, self.max_attempts)
                   for _ in range(count)]
        finished = False
        try:
            for index, fut in enumerate(as_completed(futures), start=1):
                value, attempts = fut.result()
                logger.info("prime %d/%d found after %d attempts", index, count, attempts)
                yield PrimeResult(index=index, value=value, attempts=attempts)
            finished = True
        except Exception as e:
            logger.error("search aborted: %s", e)
            raise
        finally:
            # unfinished run: drop queued units, don't wait on running ones
            pool.shutdown(wait=finished, cancel_futures=not finished)
        logger.info("run finished in %.3fs", time.perf_counter() - t0)

    def run(self, bit_length: int, count: int) -> List[PrimeResult]:
        return list(self.generate(bit_length, count))

def generate_primes(bit_length: int, count: int = 1, **kw) -> List[PrimeResult]:
    return SearchCoordinator(**kw).run(bit_length, count)
