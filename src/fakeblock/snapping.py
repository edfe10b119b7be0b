from typing import Optional

from glm import ivec3
from gdpc.vector_tools import Vec3iLike, UP, DOWN

from .materials import TransparencyMode, SnapOverride, isLiquidLike, isPartialHeightShape, isPureWater, isTransparentFromAbove, resolveOverride
from .world import World


def snapToSurface(world: World, start: Vec3iLike, mode: TransparencyMode) -> ivec3:
    """Returns the position in the column of <start> that a viewer perceives as the surface.

    The scan first moves up out of any solid blocks, then descends until it reaches the ground.
    When water is opaque, a liquid column snaps to its topmost water (or liquid) block. When water
    is transparent, it snaps to the seabed below the liquid.

    The result always lies within the world's vertical bounds.
    """

    lastY = world.yEnd - 1

    column = ivec3(start[0], min(max(start[1], world.yBegin), lastY), start[2])

    # Move up until we are in an open cell, so that the descent starts from open space.
    while not isTransparentFromAbove(world.getBlock(column), mode) and column.y < lastY:
        column = column + UP

    current                      = column
    lastTransparent              = column
    inLiquidColumn               = False
    firstLiquid: Optional[ivec3] = None
    firstWater:  Optional[ivec3] = None
    seabed:      Optional[ivec3] = None

    while current.y >= world.yBegin:
        block = world.getBlock(current)

        override = resolveOverride(block, mode)
        if override is SnapOverride.SELF:
            return current
        if override is SnapOverride.ABOVE:
            return current + UP if current.y + 1 <= lastY else current
        if override is SnapOverride.TWO_ABOVE:
            if current.y + 2 <= lastY:
                return current + 2*UP
            return current + UP if current.y + 1 <= lastY else current
        if override is SnapOverride.COLUMN_SURFACE and not mode.waterTransparent:
            return current
        # COLUMN_SEABED, and COLUMN_SURFACE with transparent water, continue as liquid.

        if isLiquidLike(block, mode):
            if not inLiquidColumn:
                inLiquidColumn = True
                firstLiquid = current
            if firstWater is None and isPureWater(block):
                firstWater = current
            current = current + DOWN
            continue

        if isTransparentFromAbove(block, mode):
            if isPartialHeightShape(block):
                return current
            lastTransparent = current
            current = current + DOWN
            continue

        if isPartialHeightShape(block):
            return current

        if not inLiquidColumn:
            return current

        seabed = current
        break

    if not mode.waterTransparent:
        if firstWater is not None:
            return firstWater
        if firstLiquid is not None:
            return firstLiquid
        return lastTransparent

    if seabed is not None:
        return seabed
    return lastTransparent
