# chaos_jump/tests/test_collision.py
"""
AABB collision sanity.

Usage (from repo root):
  python -m chaos_jump.tests.test_collision
"""
from dataclasses import dataclass

from chaos_jump.game.geometry import collides, to_rect


@dataclass
class Box:
    x: float
    y: float
    width: float
    height: float


def test_disjoint_boxes_do_not_collide():
    a, b = Box(0, 0, 10, 10), Box(20, 20, 10, 10)
    assert not collides(a, b)
    assert not collides(b, a)


def test_overlapping_boxes_collide():
    a, b = Box(0, 0, 10, 10), Box(5, 5, 10, 10)
    assert collides(a, b)
    assert collides(b, a)


def test_shared_edge_is_not_overlap():
    a = Box(0, 0, 10, 10)
    assert not collides(a, Box(10, 0, 10, 10)), "touching on the right edge"
    assert not collides(a, Box(0, 10, 10, 10)), "touching on the bottom edge"


def test_symmetry_over_a_grid():
    a = Box(3.5, 2.25, 12, 7)
    for bx in range(-15, 20, 3):
        for by in range(-10, 15, 3):
            b = Box(bx * 1.1, by * 0.9, 6, 9)
            assert collides(a, b) == collides(b, a), f"asymmetric at {b}"


def test_containment_collides():
    assert collides(Box(0, 0, 100, 100), Box(40, 40, 5, 5))


def test_rect_view_truncates_to_ints():
    r = to_rect(Box(1.9, 2.2, 32, 32))
    assert (r.x, r.y, r.w, r.h) == (1, 2, 32, 32)


def main():
    test_disjoint_boxes_do_not_collide()
    test_overlapping_boxes_collide()
    test_shared_edge_is_not_overlap()
    test_symmetry_over_a_grid()
    test_containment_collides()
    test_rect_view_truncates_to_ints()
    print("✓ collision checks passed")


if __name__ == "__main__":
    main()
