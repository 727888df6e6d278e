import pytest

from delve.core.geometry import Rect, overlaps, clamp_rect
from delve.entities.enemy_entities import Skeleton


RECT_PAIRS = [
    (Rect(0, 0, 16, 16), Rect(8, 8, 16, 16)),
    (Rect(0, 0, 16, 16), Rect(16, 0, 16, 16)),
    (Rect(0, 0, 320, 16), Rect(100, -5, 4, 40)),
    (Rect(10.5, 20.25, 3, 3), Rect(0, 0, 5, 5)),
    (Rect(0, 184, 320, 16), Rect(100, 168, 16, 16)),
]


@pytest.mark.parametrize("a,b", RECT_PAIRS)
def test_overlap_is_symmetric(a, b):
    assert overlaps(a, b) == overlaps(b, a)


def test_shared_vertical_edge_is_not_overlap():
    a = Rect(0, 0, 16, 16)
    b = Rect(16, 0, 16, 16)
    assert not overlaps(a, b)
    assert overlaps(a, b.move(-1, 0))
    assert overlaps(a.move(1, 0), b)


def test_shared_horizontal_edge_is_not_overlap():
    standing = Rect(100, 168, 16, 16)
    floor = Rect(0, 184, 320, 16)
    assert not overlaps(standing, floor)
    assert overlaps(standing.move(0, 1), floor)


def test_corner_touch_is_not_overlap():
    assert not overlaps(Rect(0, 0, 10, 10), Rect(10, 10, 10, 10))


def test_containment_overlaps():
    assert overlaps(Rect(0, 0, 100, 100), Rect(40, 40, 2, 2))


def test_overlaps_accepts_entities():
    skeleton = Skeleton(50, 50)
    assert overlaps(skeleton, Rect(60, 60, 16, 16))
    assert Rect(66, 50, 16, 16).overlaps(skeleton) is False


@pytest.mark.parametrize("w,h", [(0, 10), (10, 0), (-1, 5)])
def test_rect_rejects_non_positive_size(w, h):
    with pytest.raises(ValueError):
        Rect(0, 0, w, h)


def test_rect_edges():
    r = Rect(10, 20, 30, 40)
    assert (r.left, r.right, r.top, r.bottom) == (10, 40, 20, 60)
    assert r.centerx == 25


def test_clamp_rect_inside_returns_same_object():
    r = Rect(10, 10, 50, 8)
    assert clamp_rect(r, 320, 200) is r


def test_clamp_rect_shifts_back_into_bounds():
    assert clamp_rect(Rect(290, 52, 50, 8), 320, 200) == Rect(270, 52, 50, 8)
    assert clamp_rect(Rect(-5, -3, 50, 8), 320, 200) == Rect(0, 0, 50, 8)


def test_clamp_rect_shrinks_oversized():
    assert clamp_rect(Rect(-10, 0, 400, 8), 320, 200) == Rect(0, 0, 320, 8)
