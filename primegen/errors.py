class PrimeGenError(Exception):
    """Base class for everything primegen raises on purpose."""


class EntropyError(PrimeGenError):
    """The OS random source could not supply bytes. Fatal for the run."""


class SearchExhausted(PrimeGenError):
    """A search unit drew max_attempts candidates without finding a prime."""

    # args holds only the count so the exception survives a process-pool pickle round trip
    def __init__(self, attempts: int):
        super().__init__(attempts)
        self.attempts = attempts

    def __str__(self):
        return f"no prime found after {self.args[0]} candidates"


class ParameterError(PrimeGenError, ValueError):
    pass
