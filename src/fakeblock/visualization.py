from typing import Iterable, List, Optional
from dataclasses import dataclass
import logging

from glm import ivec3
from gdpc.vector_tools import Box, Vec3iLike

from .styles import VisualizationStyle
from .materials import TransparencyMode, isWaterLike
from .placement import displayWindowAround, planMarkers
from .elements import ElementCallback, PlacementInstruction, resolveMarkers
from .world import World
from .constants import DISPLAY_ZONE_RADIUS


logger = logging.getLogger(__name__)


@dataclass
class Boundary:
    region: Box
    style:  VisualizationStyle = VisualizationStyle.CLAIM


def isSubmerged(world: World, feet: Vec3iLike):
    """Returns whether a viewer with their feet at <feet> is in water. Lava does not count."""
    return isWaterLike(world.getBlock(feet))


class FakeBlockVisualization:
    """Computes the fake blocks that show a set of boundaries to one viewer.

    The display window is centered on <visualizeFrom>, the position the visualization was started
    from, so it does not move along with the viewer. Standard boundaries are outlined at y=<height>
    (default: the y of <visualizeFrom>).
    """

    def __init__(self, world: World, visualizeFrom: Vec3iLike, height: Optional[int] = None, displayZoneRadius: int = DISPLAY_ZONE_RADIUS):
        self._world             = world
        self._visualizeFrom     = ivec3(*visualizeFrom)
        self._height            = self._visualizeFrom.y if height is None else height
        self._displayZoneRadius = displayZoneRadius

    @property
    def world(self):
        return self._world

    @property
    def visualizeFrom(self):
        return self._visualizeFrom

    @property
    def height(self):
        return self._height

    @property
    def displayZoneRadius(self):
        return self._displayZoneRadius

    def render(self, boundaries: Iterable[Boundary], viewerFeet: Optional[Vec3iLike] = None, onElementAdded: Optional[ElementCallback] = None):
        """Returns the placement instructions for <boundaries>.

        Water is transparent if the viewer is submerged. The viewer's feet default to
        <visualizeFrom>.
        """
        feet = self._visualizeFrom if viewerFeet is None else viewerFeet
        mode = TransparencyMode.fromSubmerged(isSubmerged(self._world, feet))

        instructions: List[PlacementInstruction] = []
        for boundary in boundaries:
            window  = displayWindowAround(self._visualizeFrom, boundary.region, boundary.style, self._world, self._displayZoneRadius)
            markers = planMarkers(boundary.region, boundary.style, window, self._world, self._height)
            instructions += resolveMarkers(self._world, markers, boundary.style, mode, onElementAdded)

        logger.debug("Rendered %i fake blocks (%s).", len(instructions), mode.value)
        return instructions
