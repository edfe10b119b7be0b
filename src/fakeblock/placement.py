"""Decides where the markers of a boundary go.

Two planners exist. The standard planner outlines a region at a single height and leaves the final
y-coordinate of snapped markers to snapToSurface(). The 3D planner outlines both the bottom and top
of a height-bounded region at their true positions.
"""

from typing import List, Optional
from dataclasses import dataclass
import logging

from glm import ivec3
from gdpc.vector_tools import Box, Vec3iLike

from .vector_tools import checkRegion, boxIntersection, rectIntersection
from .styles import VisualizationStyle, MarkerRole, Placement, placementFor, styleFlags
from .world import World
from .constants import DISPLAY_ZONE_RADIUS, SIDE_MARKER_STEP


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Marker:
    position:  ivec3
    role:      MarkerRole
    placement: Placement


def displayWindowAround(origin: Vec3iLike, region: Box, style: VisualizationStyle, world: World, radius: int = DISPLAY_ZONE_RADIUS):
    """Returns the box within which markers of <region> are shown when visualized from <origin>.

    Horizontally, the window extends <radius> blocks from <origin>. Vertically, it spans the whole
    world, except for 3D styles, where it spans the region's height plus one block on each side.
    """
    minY, maxY = world.yBegin, world.yEnd - 1
    if styleFlags(style).uses3D:
        minY = max(minY, region.begin.y - 1)
        maxY = max(minY, min(maxY, region.last.y + 1))
    return Box.between(
        (origin[0] - radius, minY, origin[2] - radius),
        (origin[0] + radius, maxY, origin[2] + radius),
    )


def planStandardMarkers(region: Box, style: VisualizationStyle, displayWindow: Box, height: Optional[int] = None, step: int = SIDE_MARKER_STEP):
    """Plans the markers of <region> outlined at y=<height> (default: the region's top layer).

    Side markers are placed every <step> blocks along each edge and directly next to each corner.
    Edges spanning two blocks or fewer only get their corners. Markers are kept only if their
    x and z lie within both <region> and <displayWindow>.
    """
    y = region.last.y if height is None else height

    area = region.toRect()
    clip = rectIntersection(displayWindow.toRect(), area)
    if clip is None:
        logger.debug("Region %s lies outside of the display window %s.", region, displayWindow)
        return []

    # Rects live on the XZ-plane, so their second component is z.
    first, last = area.begin, area.last
    markers: List[Marker] = []

    def add(x: int, z: int, role: MarkerRole):
        if clip.contains((x, z)):
            markers.append(Marker(ivec3(x, y, z), role, placementFor(style, role)))

    # North and south edges
    for x in range(max(first.x + step, clip.begin.x), min(last.x - step // 2, clip.last.x), step):
        add(x, last.y,  MarkerRole.SIDE)
        add(x, first.y, MarkerRole.SIDE)
    # The first and last side markers are always directly next to the corners.
    if area.size.x > 2:
        add(first.x + 1, last.y,  MarkerRole.SIDE)
        add(first.x + 1, first.y, MarkerRole.SIDE)
        add(last.x  - 1, last.y,  MarkerRole.SIDE)
        add(last.x  - 1, first.y, MarkerRole.SIDE)

    # East and west edges
    for z in range(max(first.y + step, clip.begin.y), min(last.y - step // 2, clip.last.y), step):
        add(first.x, z, MarkerRole.SIDE)
        add(last.x,  z, MarkerRole.SIDE)
    if area.size.y > 2:
        add(first.x, first.y + 1, MarkerRole.SIDE)
        add(last.x,  first.y + 1, MarkerRole.SIDE)
        add(first.x, last.y  - 1, MarkerRole.SIDE)
        add(last.x,  last.y  - 1, MarkerRole.SIDE)

    # Corners go last so that they take precedence on very small regions.
    add(first.x, last.y,  MarkerRole.CORNER)
    add(last.x,  last.y,  MarkerRole.CORNER)
    add(first.x, first.y, MarkerRole.CORNER)
    add(last.x,  first.y, MarkerRole.CORNER)

    return markers


def plan3DMarkers(region: Box, displayWindow: Box, world: Optional[World] = None):
    """Plans the markers of a height-bounded region at its bottom and top layer.

    Each layer gets its four corners, side markers next to the corners of edges longer than two
    blocks, and a vertical indicator one block inward (up from the bottom layer, down from the top
    layer) at each corner. Markers are kept only if they lie within both <region> and
    <displayWindow>. Layers outside of <world>'s vertical bounds are skipped.
    All markers are exact.
    """
    clip = boxIntersection(displayWindow, region)
    if clip is None:
        logger.debug("Region %s lies outside of the display window %s.", region, displayWindow)
        return []

    first, last = region.begin, region.last
    markers: List[Marker] = []

    def inWorld(y: int):
        return world is None or world.yBegin <= y < world.yEnd

    def add(x: int, y: int, z: int, role: MarkerRole):
        if clip.contains((x, y, z)):
            markers.append(Marker(ivec3(x, y, z), role, Placement.EXACT))

    yLevels = sorted({first.y, last.y})
    for y in yLevels:
        if not inWorld(y):
            continue

        if region.size.x > 2:
            add(first.x + 1, y, last.z,  MarkerRole.SIDE)
            add(first.x + 1, y, first.z, MarkerRole.SIDE)
            add(last.x  - 1, y, last.z,  MarkerRole.SIDE)
            add(last.x  - 1, y, first.z, MarkerRole.SIDE)
        if region.size.z > 2:
            add(first.x, y, first.z + 1, MarkerRole.SIDE)
            add(last.x,  y, first.z + 1, MarkerRole.SIDE)
            add(first.x, y, last.z  - 1, MarkerRole.SIDE)
            add(last.x,  y, last.z  - 1, MarkerRole.SIDE)

        add(first.x, y, last.z,  MarkerRole.CORNER)
        add(last.x,  y, last.z,  MarkerRole.CORNER)
        add(first.x, y, first.z, MarkerRole.CORNER)
        add(last.x,  y, first.z, MarkerRole.CORNER)

        verticalY = y + 1 if y == first.y else y - 1
        # In a region of height 2, the indicator would cover the other layer's corner.
        if verticalY in yLevels or not inWorld(verticalY):
            continue
        add(first.x, verticalY, last.z,  MarkerRole.SIDE)
        add(last.x,  verticalY, last.z,  MarkerRole.SIDE)
        add(first.x, verticalY, first.z, MarkerRole.SIDE)
        add(last.x,  verticalY, first.z, MarkerRole.SIDE)

    return markers


def planMarkers(region: Box, style: VisualizationStyle, displayWindow: Box, world: Optional[World] = None, height: Optional[int] = None):
    """Plans the markers of <region> for <style>.

    3D styles use plan3DMarkers() when the region is more than one block high; everything else uses
    planStandardMarkers() at y=<height>. Raises a RegionError if <region> is empty.
    """
    checkRegion(region)
    if styleFlags(style).uses3D and region.size.y > 1:
        markers = plan3DMarkers(region, displayWindow, world)
    else:
        markers = planStandardMarkers(region, style, displayWindow, height)
    logger.debug("Planned %i markers for %s region %s.", len(markers), style.value, region)
    return markers
