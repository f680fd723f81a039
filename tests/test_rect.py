import pytest

from gamecore.rect import IRect, Rect
from gamecore.vec2 import IVec2, Vec2


def test_default_rect_is_empty():
    assert Rect().size() == Vec2(0.0, 0.0)
    assert IRect().size() == IVec2(0, 0)


@pytest.mark.parametrize(
    "p1, p2",
    [
        (Vec2(1, 2), Vec2(5, 8)),
        (Vec2(5, 8), Vec2(1, 2)),
        (Vec2(5, 2), Vec2(1, 8)),
        (Vec2(-3, -4), Vec2(-1, 6)),
    ],
)
def test_edges_are_ordered(p1, p2):
    r = Rect(p1, p2)
    assert r.left() <= r.right()
    assert r.bottom() <= r.top()
    assert {r.left(), r.right()} == {p1.x, p2.x}
    assert {r.bottom(), r.top()} == {p1.y, p2.y}


def test_size_independent_of_corner_order():
    a = Rect(Vec2(1, 2), Vec2(5, 8))
    b = Rect(Vec2(5, 8), Vec2(1, 2))
    c = Rect(Vec2(1, 8), Vec2(5, 2))
    assert a.size() == b.size() == c.size()
    assert a.size() == Vec2(a.right() - a.left(), a.top() - a.bottom())


def test_irect_edges_and_size():
    r = IRect(IVec2(10, 3), IVec2(2, 7))
    assert (r.left(), r.right()) == (2, 10)
    assert (r.bottom(), r.top()) == (3, 7)
    assert r.size() == IVec2(r.right() - r.left(), r.top() - r.bottom())
    assert isinstance(r.size().x, int)


def test_size_non_negative():
    r = IRect(IVec2(4, 9), IVec2(-6, -1))
    size = r.size()
    assert size.x >= 0 and size.y >= 0