from sympy import isprime

import verify_suite


def test_generated_case_passes():
    assert verify_suite.check_generated(32, 2)["ok"]


def test_carmichael_cases_rejected():
    for n in verify_suite.CARMICHAEL[:5]:
        assert verify_suite.check_composite(n, "carmichael")["ok"]


def test_semiprime_builder():
    n = verify_suite.rand_semiprime(64)
    assert not isprime(n)
    assert 60 <= n.bit_length() <= 64
