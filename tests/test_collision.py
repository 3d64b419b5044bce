from endless_runner.domain.collision import rects_overlap
from endless_runner.domain.game_state import Obstacle


def rect(x, y, w, h):
    return Obstacle(x=x, y=y, width=w, height=h)


class TestRectsOverlap:
    def test_strict_overlap_collides(self):
        assert rects_overlap(rect(0, 0, 10, 10), rect(5, 5, 10, 10))

    def test_containment_collides(self):
        assert rects_overlap(rect(0, 0, 100, 100), rect(10, 10, 5, 5))

    def test_touching_right_edge_does_not_collide(self):
        a = rect(0, 0, 10, 10)
        assert not rects_overlap(a, rect(a.x + a.width, 0, 10, 10))

    def test_touching_bottom_edge_does_not_collide(self):
        a = rect(0, 0, 10, 10)
        assert not rects_overlap(a, rect(0, a.y + a.height, 10, 10))

    def test_overlap_on_one_axis_only(self):
        assert not rects_overlap(rect(0, 0, 10, 10), rect(5, 20, 10, 10))
        assert not rects_overlap(rect(0, 0, 10, 10), rect(20, 5, 10, 10))

    def test_symmetric(self):
        a, b = rect(0, 0, 10, 10), rect(9.5, 9.5, 1, 1)
        assert rects_overlap(a, b) == rects_overlap(b, a) is True
