import requests

import gen_client


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload or {}
        self.text = str(self._payload)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}", response=self)

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


OK = FakeResponse(200, {"primes": [{"index": 1, "value": "4294967291"}], "duration_ms": 3})


def test_success_first_try(capsys):
    session = FakeSession([OK])
    assert gen_client.run(session, bits=32, count=1, max_tries=3, sleep=lambda s: None) == 0
    assert session.calls[0][0].endswith("/api/primes")
    assert session.calls[0][1] == {"bits": 32, "count": 1}
    assert "1: 4294967291" in capsys.readouterr().out


def test_retries_transport_errors():
    slept = []
    session = FakeSession([requests.ConnectionError("down"), FakeResponse(503), OK])
    assert gen_client.run(session, bits=32, count=1, max_tries=4, sleep=slept.append) == 0
    assert len(slept) == 2
    assert all(0 < s <= 15.0 for s in slept)


def test_gives_up(capsys):
    slept = []
    session = FakeSession([requests.Timeout("slow")] * 3)
    assert gen_client.run(session, bits=32, count=1, max_tries=3, sleep=slept.append) == 2
    assert len(slept) == 2
    assert "gave up" in capsys.readouterr().out


def test_bad_request_not_retried():
    session = FakeSession([FakeResponse(400, {"ok": False, "error": "bits"})])
    assert gen_client.run(session, bits=30, count=1, max_tries=3, sleep=lambda s: None) == 2
    assert len(session.calls) == 1


def test_backoff_is_capped():
    assert gen_client.backoff_s(10) == 15.0
