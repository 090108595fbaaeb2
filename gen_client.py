import os, sys, time, json, random, requests

BASE_URL     = (os.getenv("BASE_URL", "http://127.0.0.1:8080") or "http://127.0.0.1:8080").rstrip("/")
BITS         = int(os.getenv("BITS", "256"))
COUNT        = int(os.getenv("COUNT", "1"))
READ_TIMEOUT = float(os.getenv("READ_TIMEOUT", "90"))
MAX_TRIES    = int(os.getenv("MAX_TRIES", "4"))

def new_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": "primegen-client/1.0", "Accept": "application/json"})
    return session

def fetch_primes(session, bits: int, count: int, timeout: float = READ_TIMEOUT) -> dict:
    """One call to /api/primes. Raises on transport errors and non-2xx replies."""
    r = session.get(f"{BASE_URL}/api/primes", params={"bits": bits, "count": count}, timeout=timeout)
    r.raise_for_status()
    return r.json()

def backoff_s(try_no: int) -> float:
    # capped exponential backoff with jitter
    return min(15.0, (2 ** try_no) + random.uniform(0, 2))

def run(session, bits: int = BITS, count: int = COUNT, max_tries: int = MAX_TRIES,
        sleep=time.sleep) -> int:
    for t in range(1, max_tries + 1):
        t0 = time.time()
        try:
            data = fetch_primes(session, bits, count)
        except requests.HTTPError as e:
            body = e.response.text[:500] if e.response is not None else ""
            print("http_error", f"try={t}", repr(e), body, flush=True)
            if e.response is not None and e.response.status_code == 400:
                return 2  # bad parameters won't improve on retry
        except requests.RequestException as e:
            print("requests_error", f"try={t}", "err=" + repr(e), flush=True)
        else:
            for p in data.get("primes", []):
                print(f"{p['index']}: {p['value']}", flush=True)
            print("elapsed_s", round(time.time() - t0, 3), "server_ms", data.get("duration_ms"), flush=True)
            return 0
        if t < max_tries:
            sleep(backoff_s(t))
    print("final_error", "gave up", flush=True)
    return 2

if __name__ == "__main__":
    print(json.dumps({"base_url": BASE_URL, "bits": BITS, "count": COUNT}), flush=True)
    sys.exit(run(new_session()))
