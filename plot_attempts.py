#!/usr/bin/env python3

import argparse
import matplotlib.pyplot as plt
import numpy as np

from primegen.search import SearchCoordinator
from primegen.stats import expected_attempts, summarize_attempts

def plot_attempts(bits=256, count=50, executor="process", out=None):
    """Histogram of candidates drawn per prime, expected mean marked."""
    results = SearchCoordinator(executor=executor).run(bits, count)
    s = summarize_attempts(results, bits)
    attempts = np.array([r.attempts for r in results])

    plt.figure(figsize=(8, 5))
    plt.hist(attempts, bins=min(30, max(5, count // 2)), alpha=0.7, label="attempts per prime")
    plt.axvline(expected_attempts(bits), color="red", linestyle="--", label=f"ln(2^{bits}) ≈ {s['expected']:.0f}")
    plt.axvline(s["mean"], color="black", label=f"observed mean {s['mean']:.0f}")
    plt.title(f"primegen: candidates drawn per {bits}-bit prime (n={count})")
    plt.xlabel("candidates drawn")
    plt.ylabel("primes")
    plt.legend()
    if out:
        plt.savefig(out, dpi=120)
    else:
        plt.show()
    return s

if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--bits", type=int, default=256)
    ap.add_argument("--count", type=int, default=50)
    ap.add_argument("--executor", choices=("process", "thread"), default="process")
    ap.add_argument("--out", default=None, help="write PNG instead of showing a window")
    args = ap.parse_args()
    print(plot_attempts(args.bits, args.count, args.executor, args.out))
