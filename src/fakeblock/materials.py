"""Block classification for surface snapping.

All functions are pure. Block ids are compared without their "minecraft:" namespace.
Where a result depends on whether the viewer is looking through water, the caller passes the
TransparencyMode of the current render.
"""

from typing import Dict, Optional
from enum import Enum

from gdpc import Block

from .palette_tools import baseName
from .minecraft_util import (
    AIR_BLOCKS, LIQUID_BLOCKS, LIQUID_ADJACENT_BLOCKS, THIN_BLOCK_SUFFIXES,
    TRANSPARENT_BLOCKS, TRANSPARENT_BLOCK_SUFFIXES,
    SLAB_TYPES, STAIR_HALVES, STAIR_SHAPES, PARTIAL_HEIGHT_NAME_PATTERNS,
)


class TransparencyMode(Enum):
    """Whether water is looked through (viewer submerged) or stood upon (viewer dry)."""
    WATER_OPAQUE      = "water_opaque"
    WATER_TRANSPARENT = "water_transparent"

    @staticmethod
    def fromSubmerged(submerged: bool):
        return TransparencyMode.WATER_TRANSPARENT if submerged else TransparencyMode.WATER_OPAQUE

    @property
    def waterTransparent(self):
        return self is TransparencyMode.WATER_TRANSPARENT


class SnapOverride(Enum):
    """Block-specific rule that replaces the generic column scan.

    SELF:           snap to the block itself
    ABOVE:          snap to the block above it
    TWO_ABOVE:      snap to the block two above it
    COLUMN_SURFACE: snap to the block itself, unless water is transparent
    COLUMN_SEABED:  keep descending to whatever lies below the liquid
    """
    SELF           = "self"
    ABOVE          = "above"
    TWO_ABOVE      = "two_above"
    COLUMN_SURFACE = "column_surface"
    COLUMN_SEABED  = "column_seabed"


SNAP_OVERRIDES: Dict[str, SnapOverride] = {
    "lily_pad":      SnapOverride.SELF,
    "scaffolding":   SnapOverride.SELF,
    "ice":           SnapOverride.SELF,
    "packed_ice":    SnapOverride.SELF,
    "blue_ice":      SnapOverride.SELF,
    "frosted_ice":   SnapOverride.SELF,
    "cactus":        SnapOverride.ABOVE,
    "campfire":      SnapOverride.ABOVE,
    "soul_campfire": SnapOverride.ABOVE,
    "fire":          SnapOverride.TWO_ABOVE,
    "soul_fire":     SnapOverride.TWO_ABOVE,
    "lava":          SnapOverride.COLUMN_SURFACE,
    "bubble_column": SnapOverride.COLUMN_SEABED,
    "kelp":          SnapOverride.COLUMN_SEABED,
    "kelp_plant":    SnapOverride.COLUMN_SEABED,
    "seagrass":      SnapOverride.COLUMN_SEABED,
    "tall_seagrass": SnapOverride.COLUMN_SEABED,
}


def isPureWater(block: Block):
    return baseName(block.id) == "water"


def isWaterLike(block: Block):
    """Returns whether <block> is water, a water plant or a waterlogged block"""
    return isPureWater(block) or baseName(block.id) in LIQUID_ADJACENT_BLOCKS or block.states.get("waterlogged") == "true"


def isLiquidLike(block: Block, mode: TransparencyMode):
    """Returns whether <block> is a liquid or part of one.\n
    Waterlogged blocks only count as liquid when water is transparent; a dry viewer sees the
    block itself."""
    name = baseName(block.id)
    if name in LIQUID_BLOCKS or name in LIQUID_ADJACENT_BLOCKS:
        return True
    return mode.waterTransparent and block.states.get("waterlogged") == "true"


def resolveOverride(block: Block, mode: TransparencyMode) -> Optional[SnapOverride]: # pylint: disable=unused-argument
    """Returns the snap override for <block>, if any.\n
    The table does not depend on <mode>: lava is a COLUMN_SURFACE block in both modes, and
    snapToSurface decides what that means for the current mode."""
    return SNAP_OVERRIDES.get(baseName(block.id))


def isPartialHeightShape(block: Block):
    """Returns whether <block> is a slab or a stair.

    The block's states are checked first. Blocks whose states do not describe their shape are
    then matched by name ("slab", "stairs", "step"). The name match is a heuristic: it also
    accepts any future block that merely has one of these words in its id.
    """
    states = block.states
    if states.get("type") in SLAB_TYPES:
        return True
    if states.get("half") in STAIR_HALVES and states.get("shape") in STAIR_SHAPES:
        return True

    name = baseName(block.id)
    return any(pattern in name for pattern in PARTIAL_HEIGHT_NAME_PATTERNS)


def isTransparentFromAbove(block: Block, mode: TransparencyMode):
    """Returns whether a viewer looking down sees through <block> to the block below it."""
    if isLiquidLike(block, mode):
        return mode.waterTransparent

    if resolveOverride(block, mode) is not None:
        return False

    name = baseName(block.id)

    # Snow layers are thin, but are the ground as far as the viewer is concerned.
    if name == "snow":
        return False

    if isPartialHeightShape(block):
        return False

    if name in AIR_BLOCKS or name.endswith(THIN_BLOCK_SUFFIXES):
        return True

    return name in TRANSPARENT_BLOCKS or name.endswith(TRANSPARENT_BLOCK_SUFFIXES)
