import pytest

from drillbox.arena import Arena, ArenaExhausted


def test_alloc_tracks_usage():
    arena = Arena(1024)
    coords = arena.alloc(12)
    name = arena.alloc(16)
    assert len(coords) == 12
    assert len(name) == 16
    assert arena.used == len(coords) + len(name)
    assert arena.remaining == arena.capacity - arena.used


def test_regions_do_not_overlap():
    arena = Arena(8)
    first = arena.alloc(4)
    second = arena.alloc(4)
    first[:] = b"\xff" * 4
    assert bytes(second) == bytes(4)
    second[:] = b"abcd"
    assert bytes(first) == b"\xff" * 4


def test_exact_fit_then_exhausted():
    arena = Arena(16)
    assert len(arena.alloc(16)) == 16
    with pytest.raises(ArenaExhausted):
        arena.alloc(1)


def test_too_large_raises():
    arena = Arena(10)
    arena.alloc(6)
    with pytest.raises(ArenaExhausted):
        arena.alloc(5)
    assert arena.used == 6


def test_reset_reuses_buffer():
    arena = Arena(4)
    first = arena.alloc(4)
    arena.reset()
    assert arena.used == 0
    again = arena.alloc(4)
    again[:] = b"wxyz"
    assert bytes(first) == b"wxyz"


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        Arena(-1)
    with pytest.raises(ValueError):
        Arena(4).alloc(-2)