import numpy as np
import pytest
from veb import VEB, ceil_root, floor_root, next_power_of_two


@pytest.mark.parametrize("n,expected", [(1, 1), (2, 2), (3, 4), (13, 16), (16, 16), (17, 32),
                                        ((1 << 20) + 1, 1 << 21)])
def test_next_power_of_two(n, expected):
    assert next_power_of_two(n) == expected


@pytest.mark.parametrize("u", [2, 4, 8, 16, 32, 1 << 15, 1 << 20, 1 << 41])
def test_roots_multiply_to_universe(u):
    lo = floor_root(u)
    hi = ceil_root(u)
    assert lo * hi == u
    assert lo <= hi <= 2 * lo
    assert lo * lo <= u <= hi * hi


@pytest.mark.parametrize("requested,effective", [(1, 2), (2, 2), (3, 4), (13, 16), (1000, 1024)])
def test_universe_rounding(requested, effective):
    veb = VEB(requested)
    assert veb.u == effective
    assert veb.requested_u == requested


def test_non_power_of_two_matches_rounded_universe():
    a = VEB(13)
    b = VEB(16)
    for veb in (a, b):
        for k in (0, 5, 12, 15, 7):
            veb.insert(k)
        veb.remove(5)
    assert list(a) == list(b) == [0, 7, 12, 15]
    for q in range(16):
        assert a.search(q) == b.search(q)
        assert a.successor(q) == b.successor(q)
        assert a.predecessor(q) == b.predecessor(q)


def test_layout():
    veb = VEB(16)
    assert veb.summary.u == 4
    assert len(veb.clusters) == 4
    assert all(c is None for c in veb.clusters)
    leaf = VEB(2)
    assert leaf.summary is None
    assert leaf.clusters is None


def test_numpy_integers_accepted():
    veb = VEB(np.int64(64))
    assert veb.insert(np.int32(10))
    assert veb.search(np.uint8(10))
    assert veb.successor(np.int64(0)) == 10
    assert type(veb.minimum()) is int
