import pytest

from chairs.core.utils import clamp_max_len


@pytest.mark.parametrize("requested, expected", [
    (None, 8),
    (5, 5),
    ("6", 6),
    (1, 2),
    (-3, 2),
    (9999, 15),
    (0, 8),
    ("abc", 8),
    ([], 8),
    (True, 8),
    (4.7, 4),
    (float("inf"), 15),
    (float("nan"), 8),
    (float("-inf"), 2),
    (10**400, 15),
    (-(10**400), 2),
    ("1e999", 15),
])
def test_clamp_max_len(requested, expected):
    assert clamp_max_len(requested) == expected
