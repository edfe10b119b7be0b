"""Visualization styles and their appearance table.

A style determines which blocks mark the corners and sides of a boundary, whether those markers
are placed at their exact position or snapped to the surface, and whether the boundary is drawn as
a height-bounded 3D region. New styles are added here as data.
"""

from typing import Dict, Tuple
from copy import deepcopy
from dataclasses import dataclass
from enum import Enum

from gdpc import Block


class VisualizationStyle(Enum):
    CLAIM           = "claim"
    SUBDIVISION     = "subdivision"
    SUBDIVISION_3D  = "subdivision_3d"
    ADMIN_CLAIM     = "admin_claim"
    INITIALIZE_ZONE = "initialize_zone"
    CONFLICT_ZONE   = "conflict_zone"


class MarkerRole(Enum):
    CORNER = "corner"
    SIDE   = "side"


class Placement(Enum):
    EXACT   = "exact"
    SNAPPED = "snapped"


@dataclass(frozen=True)
class StyleFlags:
    exactCorners: bool = False
    exactSides:   bool = False
    uses3D:       bool = False


def lit(block: Block):
    """Returns a copy of <block> with its "lit" state set"""
    block = deepcopy(block)
    block.states["lit"] = "true"
    return block


DEFAULT_APPEARANCES: Dict[MarkerRole, Block] = {
    MarkerRole.CORNER: Block("glowstone"),
    MarkerRole.SIDE:   Block("gold_block"),
}

APPEARANCES: Dict[Tuple[VisualizationStyle, MarkerRole], Block] = {
    (VisualizationStyle.SUBDIVISION,     MarkerRole.CORNER): Block("iron_block"),
    (VisualizationStyle.SUBDIVISION,     MarkerRole.SIDE):   Block("white_wool"),
    (VisualizationStyle.SUBDIVISION_3D,  MarkerRole.CORNER): Block("iron_block"),
    (VisualizationStyle.SUBDIVISION_3D,  MarkerRole.SIDE):   Block("white_wool"),
    (VisualizationStyle.ADMIN_CLAIM,     MarkerRole.CORNER): Block("glowstone"),
    (VisualizationStyle.ADMIN_CLAIM,     MarkerRole.SIDE):   Block("pumpkin"),
    (VisualizationStyle.INITIALIZE_ZONE, MarkerRole.CORNER): Block("diamond_block"),
    (VisualizationStyle.INITIALIZE_ZONE, MarkerRole.SIDE):   Block("diamond_block"),
    (VisualizationStyle.CONFLICT_ZONE,   MarkerRole.CORNER): lit(Block("redstone_ore")),
    (VisualizationStyle.CONFLICT_ZONE,   MarkerRole.SIDE):   Block("netherrack"),
}

DEFAULT_FLAGS = StyleFlags()

STYLE_FLAGS: Dict[VisualizationStyle, StyleFlags] = {
    # Claim corners stay visible even when the viewer is not standing on the ground.
    VisualizationStyle.CLAIM:          StyleFlags(exactCorners=True),
    VisualizationStyle.SUBDIVISION_3D: StyleFlags(exactCorners=True, exactSides=True, uses3D=True),
}


def styleFlags(style: VisualizationStyle):
    return STYLE_FLAGS.get(style, DEFAULT_FLAGS)


def appearanceTemplate(style: VisualizationStyle, role: MarkerRole) -> Block:
    """Returns the shared appearance template for <role> markers of <style>. Do not modify it; use
    elements.appearanceFor() for a modifiable copy."""
    return APPEARANCES.get((style, role), DEFAULT_APPEARANCES[role])


def placementFor(style: VisualizationStyle, role: MarkerRole):
    flags = styleFlags(style)
    exact = flags.exactCorners if role is MarkerRole.CORNER else flags.exactSides
    return Placement.EXACT if exact else Placement.SNAPPED
