from typing import Optional
from abc import ABC, abstractmethod
import logging

import numpy as np
from glm import ivec3
from gdpc import Block
from gdpc.vector_tools import Box, Vec3iLike

from .vector_tools import boxIntersection, region
from .palette_tools import Palette, PaletteError, blockToTuple, tupleToBlock, hashable, loadPalette, reconstructPaletteLookup


logger = logging.getLogger(__name__)


AIR = ("air", {})


class World(ABC):
    """Read access to the blocks of a world.\n
    Valid y-coordinates are in [yBegin, yEnd)."""

    @property
    @abstractmethod
    def yBegin(self) -> int:
        """The lowest valid y-coordinate"""

    @property
    @abstractmethod
    def yEnd(self) -> int:
        """One past the highest valid y-coordinate"""

    @abstractmethod
    def getBlock(self, position: Vec3iLike) -> Block:
        """Returns the block at <position>. The result is a copy; modifying it does not affect the
        world."""


class PaletteWorld(World):
    """A world stored as a palettized block array.

    <blocks> is a 3D integer array in YXZ order containing indices into <palette>, which holds
    (basename, states)-tuples. <offset> is the world position of blocks[0,0,0].
    Positions outside the stored box read as air. The vertical bounds of the world are those of the
    stored box.
    """

    def __init__(self, blocks: np.ndarray, palette: Palette, offset: Vec3iLike = (0,0,0)):
        if blocks.ndim != 3:
            raise PaletteError(f"The block array should be 3-dimensional, but has shape {blocks.shape}.")
        if blocks.size > 0 and int(np.max(blocks)) >= len(palette):
            raise PaletteError(f"The block array contains the index {int(np.max(blocks))}, which exceeds the palette size ({len(palette)}).")

        self._blocks        = blocks
        self._palette       = [(name, dict(states)) for name, states in palette]
        self._paletteLookup = reconstructPaletteLookup(self._palette)
        self._box           = region(offset, (blocks.shape[1], blocks.shape[0], blocks.shape[2]))

    @staticmethod
    def filled(box: Box, block: Block = Block("air"), dtype=np.uint16):
        """Returns a PaletteWorld spanning <box> that consists entirely of <block>"""
        blocks = np.zeros((box.size.y, box.size.x, box.size.z), dtype=dtype)
        return PaletteWorld(blocks, [blockToTuple(block)], box.offset)

    @property
    def box(self):
        return self._box

    @property
    def yBegin(self):
        return self._box.begin.y

    @property
    def yEnd(self):
        return self._box.end.y

    @property
    def palette(self):
        return self._palette

    def _paletteIndex(self, block: Block):
        blockTuple = blockToTuple(block)
        index = self._paletteLookup.get(hashable(blockTuple))
        if index is None:
            index = len(self._palette)
            if index > np.iinfo(self._blocks.dtype).max:
                raise PaletteError(f"The palette does not fit in the block array's dtype ({self._blocks.dtype}).")
            self._palette.append(blockTuple)
            self._paletteLookup[hashable(blockTuple)] = index
        return index

    def getBlock(self, position: Vec3iLike):
        if not self._box.contains(position):
            return tupleToBlock(AIR)
        local = ivec3(*position) - self._box.offset
        return tupleToBlock(self._palette[self._blocks[local.y, local.x, local.z]]) # YXZ order

    def setBlock(self, position: Vec3iLike, block: Block):
        """Places <block> at <position>, which must lie inside this world's box."""
        if not self._box.contains(position):
            raise IndexError(f"Position {tuple(position)} lies outside of {self._box}")
        local = ivec3(*position) - self._box.offset
        self._blocks[local.y, local.x, local.z] = self._paletteIndex(block)

    def fill(self, box: Box, block: Block):
        """Places <block> at every position of <box> that lies inside this world's box."""
        overlap = boxIntersection(self._box, box)
        if overlap is None:
            return
        begin = overlap.begin - self._box.offset
        end   = overlap.end   - self._box.offset
        self._blocks[begin.y:end.y, begin.x:end.x, begin.z:end.z] = self._paletteIndex(block)


def loadDataset(datasetDir: str, offset: Vec3iLike = (0,0,0), sampleIndex: Optional[int] = None):
    """Loads a dataset directory containing blocks.npy and palette.json as a PaletteWorld.

    Multi-sample datasets store their samples along leading axes; <sampleIndex> then selects a
    sample by flat index (default: the first).
    """
    blocks  = np.load(f"{datasetDir}/blocks.npy", mmap_mode="r")
    palette = loadPalette(f"{datasetDir}/palette.json")

    if blocks.ndim < 3:
        raise PaletteError(f"The block array should have at least 3 dimensions, but has shape {blocks.shape}.")
    if blocks.ndim > 3:
        metaShape = blocks.shape[:-3]
        blocks = blocks[np.unravel_index(sampleIndex or 0, metaShape)]
        logger.debug("Selected sample %i of %i.", sampleIndex or 0, int(np.prod(metaShape)))

    return PaletteWorld(np.array(blocks), palette, offset)
