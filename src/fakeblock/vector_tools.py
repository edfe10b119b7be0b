"""Region helpers that gdpc.vector_tools does not provide"""

from typing import Optional

import glm
from gdpc.vector_tools import Vec3iLike, Rect, Box


class RegionError(ValueError):
    """A Box has a non-positive size."""


def checkRegion(box: Box):
    """Returns <box>, or raises a RegionError if its size is not positive in each axis"""
    if box.size.x < 1 or box.size.y < 1 or box.size.z < 1:
        raise RegionError(f"Box size must be positive in each axis, got {tuple(box.size)}")
    return box


def region(offset: Vec3iLike, size: Vec3iLike):
    """Returns the Box at <offset> with <size>, which must be positive in each axis"""
    return checkRegion(Box(offset, size))


def rectIntersection(a: Rect, b: Rect) -> Optional[Rect]:
    """Returns the overlap of <a> and <b>, or None if they do not overlap.\n
    Unlike Rect.collides(), rects that merely touch do not overlap."""
    begin = glm.max(a.begin, b.begin)
    end   = glm.min(a.end,   b.end)
    if end.x <= begin.x or end.y <= begin.y:
        return None
    return Rect(begin, end - begin)


def boxIntersection(a: Box, b: Box) -> Optional[Box]:
    """Returns the overlap of <a> and <b>, or None if they do not overlap"""
    begin = glm.max(a.begin, b.begin)
    end   = glm.min(a.end,   b.end)
    if end.x <= begin.x or end.y <= begin.y or end.z <= begin.z:
        return None
    return Box(begin, end - begin)
