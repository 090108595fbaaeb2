from .errors import EntropyError, ParameterError, PrimeGenError, SearchExhausted
from .filters import passes_quick_filter, quick_reject
from .miller_rabin import ROUNDS, is_probable_prime
from .sampler import draw_witness, sample_candidate
from .search import PrimeResult, SearchCoordinator, find_one_prime, generate_primes

__all__ = [
    "EntropyError", "ParameterError", "PrimeGenError", "SearchExhausted",
    "passes_quick_filter", "quick_reject",
    "ROUNDS", "is_probable_prime",
    "draw_witness", "sample_candidate",
    "PrimeResult", "SearchCoordinator", "find_one_prime", "generate_primes",
]
