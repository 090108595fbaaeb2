import json, time
from flask import Flask, request, jsonify, Response
from werkzeug.exceptions import BadRequest

from primegen.config import load_settings
from primegen.miller_rabin import ROUNDS, is_probable_prime
from primegen.params import check_bits_count
from primegen.errors import ParameterError
from primegen.search import SearchCoordinator

app = Flask(__name__)
settings = load_settings()

def _bits_count_args() -> tuple[int, int]:
    b_str = request.args.get("bits", "").strip()
    c_str = request.args.get("count", "1").strip() or "1"
    if not b_str:
        raise BadRequest("missing bits")
    try:
        bits, count = int(b_str), int(c_str)
    except ValueError:
        raise BadRequest("bits and count must be integers")
    try:
        check_bits_count(bits, count, max_bits=settings.api_max_bits, max_count=settings.api_max_count)
    except ParameterError as e:
        raise BadRequest(str(e))
    return bits, count

def _coordinator() -> SearchCoordinator:
    return SearchCoordinator.from_settings(settings)

@app.errorhandler(BadRequest)
def bad_request(e):
    return jsonify(ok=False, error=e.description), 400

# /api/primes?bits=256&count=3
@app.get("/api/primes")
def api_primes():
    bits, count = _bits_count_args()
    t0 = time.perf_counter()
    results = _coordinator().run(bits, count)
    dt_ms = int((time.perf_counter() - t0) * 1000)
    return jsonify(ok=True, bits=bits, count=count, duration_ms=dt_ms,
                   primes=[{"index": r.index, "value": str(r.value)} for r in results])

# one JSON object per line, flushed as each prime is found
@app.get("/api/primes/stream")
def api_primes_stream():
    bits, count = _bits_count_args()
    results = _coordinator().generate(bits, count)

    def lines():
        for r in results:
            yield json.dumps({"index": r.index, "value": str(r.value), "attempts": r.attempts}) + "\n"

    return Response(lines(), mimetype="application/x-ndjson")

@app.get("/api/is_prime")
def api_is_prime():
    n_str = request.args.get("n", "").strip()
    if not n_str:
        raise BadRequest("missing n")
    try:
        n = int(n_str)
    except ValueError:
        raise BadRequest("n must be integer")
    if n.bit_length() > settings.api_max_bits:
        raise BadRequest(f"n is capped at {settings.api_max_bits} bits")
    return jsonify(ok=True, n=str(n), probable_prime=is_probable_prime(n), rounds=ROUNDS)

@app.get("/api/health")
def api_health():
    return jsonify(ok=True, executor=settings.executor, concurrency=settings.concurrency)

if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8080)
