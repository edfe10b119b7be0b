from typing import Callable, Iterable, List, Optional
from copy import deepcopy
from dataclasses import dataclass

from glm import ivec3
from gdpc import Block

from .styles import VisualizationStyle, MarkerRole, Placement, appearanceTemplate
from .placement import Marker
from .materials import TransparencyMode
from .snapping import snapToSurface
from .world import World


ElementCallback = Callable[[ivec3, Block, VisualizationStyle], None]
"""Called with (position, fake block, style) for every resolved marker"""


@dataclass(frozen=True)
class PlacementInstruction:
    """A fake block to show at <position>.

    <originalBlock> is the real block at <position> when the instruction was made; whoever shows the
    fake block uses it to revert the change.
    """
    position:      ivec3
    originalBlock: Block
    fakeBlock:     Block


def appearanceFor(style: VisualizationStyle, role: MarkerRole):
    """Returns a copy of the block that <role> markers of <style> are shown as"""
    return deepcopy(appearanceTemplate(style, role))


def resolveMarker(world: World, marker: Marker, style: VisualizationStyle, mode: TransparencyMode, onElementAdded: Optional[ElementCallback] = None):
    """Turns <marker> into a PlacementInstruction.\n
    Exact markers stay where they are; snapped markers are moved to the surface of their column as
    seen in <mode>."""
    if marker.placement is Placement.EXACT:
        position = ivec3(marker.position)
    else:
        position = snapToSurface(world, marker.position, mode)

    fakeBlock = appearanceFor(style, marker.role)
    instruction = PlacementInstruction(position, world.getBlock(position), fakeBlock)

    if onElementAdded is not None:
        onElementAdded(position, fakeBlock, style)

    return instruction


def resolveMarkers(world: World, markers: Iterable[Marker], style: VisualizationStyle, mode: TransparencyMode, onElementAdded: Optional[ElementCallback] = None) -> List[PlacementInstruction]:
    return [resolveMarker(world, marker, style, mode, onElementAdded) for marker in markers]
