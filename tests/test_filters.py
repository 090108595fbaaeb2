import pytest

from primegen.filters import passes_quick_filter, quick_reject


@pytest.mark.parametrize("value", [0, -7, 2, 4, 3, 9, 15, 2**64, 3 * (2**61 - 1)])
def test_rejected(value):
    assert quick_reject(value)
    assert not passes_quick_filter(value)


@pytest.mark.parametrize("value", [1, 5, 7, 25, 35, 2**61 - 1, 2**127 - 1])
def test_accepted(value):
    # the filter is cheap, not exact: 25 and 35 get through to Miller-Rabin
    assert passes_quick_filter(value)
    assert not quick_reject(value)
