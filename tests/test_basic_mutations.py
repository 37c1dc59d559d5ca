from veb import VEB


def test_insert_and_search():
    veb = VEB(16)
    for k in (1, 5, 10):
        assert veb.insert(k)
    assert len(veb) == 3
    assert veb.search(5)
    assert not veb.search(7)


def test_insert_duplicates():
    veb = VEB(16)
    veb.insert(2)
    veb.insert(4)
    assert not veb.insert(2)
    assert not veb.insert(4)
    assert len(veb) == 2
    assert list(veb) == [2, 4]
    assert veb.minimum() == 2
    assert veb.maximum() == 4


def test_duplicate_of_pushed_down_key():
    veb = VEB(64)
    for k in (40, 3, 41, 17):
        veb.insert(k)
    for k in (40, 3, 41, 17):
        assert not veb.insert(k)
    assert list(veb) == [3, 17, 40, 41]
    veb.remove(17)
    assert list(veb) == [3, 40, 41]


def test_remove():
    veb = VEB(16)
    for k in (1, 2, 3, 4):
        veb.insert(k)
    assert veb.remove(2)
    assert not veb.remove(5)
    assert len(veb) == 3
    assert not veb.search(2)
    assert veb.search(3)


def test_insert_remove_round_trip():
    veb = VEB(1024)
    veb.insert(777)
    veb.remove(777)
    assert veb.is_empty()
    assert not veb
    assert veb.minimum() is None
    assert veb.maximum() is None
    assert list(veb) == []


def test_remove_everything():
    veb = VEB(256)
    keys = [0, 255, 16, 17, 128, 3, 200]
    for k in keys:
        veb.insert(k)
    for k in keys:
        assert veb.remove(k)
        assert not veb.search(k)
    assert veb.is_empty()
    assert len(veb) == 0


def test_clear():
    veb = VEB(100)
    veb.insert(10)
    veb.insert(99)
    veb.clear()
    assert veb.is_empty()
    assert len(veb) == 0
    assert not veb.search(10)
    veb.insert(50)
    assert list(veb) == [50]


def test_contains_and_iteration():
    veb = VEB(32)
    for k in (31, 0, 9, 8):
        veb.insert(k)
    assert 9 in veb
    assert 10 not in veb
    assert 32 not in veb
    assert -1 not in veb
    assert list(veb) == [0, 8, 9, 31]
    assert list(reversed(veb)) == [31, 9, 8, 0]


def test_repr():
    veb = VEB(13)
    veb.insert(3)
    assert repr(veb) == "VEB(u=16, n=1)"
