import pytest
import gdpc.vector_tools
from gdpc.vector_tools import Box, Rect

from fakeblock.vector_tools import RegionError, boxIntersection, checkRegion, rectIntersection, region
from fakeblock.world import PaletteWorld


def test_regions_are_gdpc_boxes():
    box = region((3, 9, -2), (8, 9, 10))
    assert type(box) is gdpc.vector_tools.Box
    assert box == Box.between((3, 9, -2), (10, 17, 7))
    assert type(PaletteWorld.filled(box).box) is gdpc.vector_tools.Box


@pytest.mark.parametrize("size", [(0, 1, 1), (1, 0, 1), (1, 1, -3)])
def test_non_positive_size_is_rejected(size):
    with pytest.raises(RegionError):
        region((0, 0, 0), size)
    with pytest.raises(RegionError):
        checkRegion(Box((0, 0, 0), size))


def test_region_error_is_a_value_error():
    assert issubclass(RegionError, ValueError)


def test_check_region_returns_the_box():
    box = Box.between((0, 0, 0), (1, 1, 1))
    assert checkRegion(box) is box


class TestBoxIntersection:
    def test_overlap(self):
        a = Box.between((0, 0, 0), (9, 9, 9))
        b = Box.between((5, -5, 8), (20, 3, 20))
        assert boxIntersection(a, b) == Box.between((5, 0, 8), (9, 3, 9))
        assert boxIntersection(b, a) == boxIntersection(a, b)

    def test_touching_boxes_overlap_in_one_layer(self):
        a = Box.between((0, 0, 0), (4, 4, 4))
        b = Box.between((4, 0, 0), (8, 4, 4))
        assert boxIntersection(a, b) == Box.between((4, 0, 0), (4, 4, 4))

    def test_adjacent_boxes_do_not_overlap(self):
        a = Box.between((0, 0, 0), (4, 4, 4))
        b = Box.between((5, 0, 0), (8, 4, 4))
        # gdpc considers these colliding, but they share no position.
        assert a.collides(b)
        assert boxIntersection(a, b) is None

    def test_disjoint_in_one_axis(self):
        a = Box.between((0, 0, 0), (4, 4, 4))
        b = Box.between((0, 10, 0), (4, 12, 4))
        assert boxIntersection(a, b) is None


class TestRectIntersection:
    def test_overlap(self):
        a = Rect.between((0, 0), (9, 9))
        b = Rect.between((-3, 4), (2, 30))
        assert rectIntersection(a, b) == Rect.between((0, 4), (2, 9))

    def test_adjacent_rects_do_not_overlap(self):
        assert rectIntersection(Rect.between((0, 0), (1, 1)), Rect.between((2, 0), (3, 1))) is None
