import csv, random
from concurrent.futures import ThreadPoolExecutor, as_completed
from sympy import randprime, isprime

from primegen.filters import passes_quick_filter
from primegen.miller_rabin import is_probable_prime
from primegen.search import SearchCoordinator

# OEIS A002997 (first terms): composites that fool the Fermat test for every coprime base
CARMICHAEL = [561, 1105, 1729, 2465, 2821, 6601, 8911, 10585, 15841, 29341,
              41041, 46657, 52633, 62745, 63973, 75361, 101101, 115921, 126217, 162401]

def rand_semiprime(bits):
    # two primes of about half the bits each
    half = max(3, bits // 2)
    p = randprime(2**(half-1), 2**half)
    q = randprime(2**(half-1), 2**half)
    return int(p) * int(q)

def check_generated(bits, count):
    results = SearchCoordinator(executor="thread").run(bits, count)
    bad = [r for r in results
           if not isprime(r.value) or not passes_quick_filter(r.value) or r.value.bit_length() > bits]
    indices = sorted(r.index for r in results)
    ok = not bad and indices == list(range(1, count + 1))
    return {"case": f"generate {bits}x{count}", "ok": ok,
            "reason": "" if ok else f"bad={[str(r.value) for r in bad]} indices={indices}"}

def check_composite(n, label):
    if is_probable_prime(n):
        return {"case": f"{label} {n}", "ok": False, "reason": "composite accepted"}
    return {"case": f"{label} {n}", "ok": True, "reason": ""}

def jobs():
    for bits in (32, 64, 128, 256, 512):
        yield check_generated, (bits, 3)
    for n in CARMICHAEL:
        yield check_composite, (n, "carmichael")
    for bits in (32, 64, 128, 256):
        for _ in range(5):
            yield check_composite, (rand_semiprime(bits), "semiprime")

def main():
    random.seed(42)
    results = []
    with ThreadPoolExecutor(max_workers=8) as ex:
        futs = [ex.submit(fn, *a) for fn, a in jobs()]
        for fut in as_completed(futs):
            try:
                results.append(fut.result())
            except Exception as e:
                results.append({"case": "?", "ok": False, "reason": f"exception: {e}"})

    total = len(results)
    ok = sum(1 for r in results if r["ok"])
    print("\n=== SUMMARY ===")
    print(f"Total: {total} | PASS: {ok} | FAIL: {total-ok}")

    fails = [r for r in results if not r["ok"]]
    if fails:
        fn = "verify_failures.csv"
        with open(fn, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=["case", "ok", "reason"])
            w.writeheader()
            w.writerows(fails)
        print(f"\nWrote details for {len(fails)} failures to {fn}")
        return 1
    print("\nNo failures recorded.")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
