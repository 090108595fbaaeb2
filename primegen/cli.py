import sys, time, argparse, logging

from .config import EXECUTORS, load_settings
from .errors import ParameterError, PrimeGenError
from .params import check_bits_count
from .search import SearchCoordinator
from .stats import summarize_attempts

BAD_ARGS = "Incorrect arguments provided. For help run primegen -h."

def format_elapsed(seconds: float) -> str:
    """hh:mm:ss.fffffff (100ns ticks)."""
    ticks = int(round(seconds * 10_000_000))
    secs, frac = divmod(ticks, 10_000_000)
    h, rem = divmod(secs, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}.{frac:07d}"

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="primegen",
        description="Generate probable primes of a given bit length (Miller-Rabin, 10 rounds).")
    ap.add_argument("bits", help="the number of bits of the prime number, this must be a "
                                 "multiple of 8, and at least 32 bits")
    ap.add_argument("count", nargs="?", default="1",
                    help="the number of prime numbers to generate, defaults to 1")
    ap.add_argument("--workers", type=int, default=None, help="override PRIMEGEN_CONCURRENCY")
    ap.add_argument("--executor", choices=EXECUTORS, default=None, help="override PRIMEGEN_EXECUTOR")
    ap.add_argument("--stats", action="store_true", help="print attempts-per-prime summary")
    ap.add_argument("-v", "--verbose", action="store_true", help="INFO logging on stderr")
    return ap

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(level=logging.INFO if args.verbose else settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        bits, count = int(args.bits, 10), int(args.count, 10)
        check_bits_count(bits, count)
        coord = SearchCoordinator(concurrency=args.workers or settings.concurrency,
                                  executor=args.executor or settings.executor,
                                  max_attempts=settings.max_attempts)
    except (ValueError, ParameterError):
        print(BAD_ARGS, file=sys.stderr)
        return 2

    print(f"BitLength: {bits} bits", flush=True)
    t0 = time.perf_counter()
    results = []
    try:
        for res in coord.generate(bits, count):
            print(f"{res.index}: {res.value}", flush=True)
            if res.index != count:
                print(flush=True)
            results.append(res)
    except PrimeGenError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(f"Time to Generate: {format_elapsed(time.perf_counter() - t0)}", flush=True)

    if args.stats:
        s = summarize_attempts(results, bits)
        print(f"Attempts: mean={s['mean']:.1f} median={s['median']:.1f} p90={s['p90']:.1f} "
              f"max={s['max']} total={s['total']} expected~{s['expected']:.1f}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
