import pytest
from gdpc import Block
from gdpc.vector_tools import Box

from fakeblock.world import PaletteWorld


@pytest.fixture
def makeColumn():
    """Returns a function that builds a single-column world at x=z=0.

    Blocks are given from top to bottom, either as ids or as Blocks. The bottom block is at y=0.
    """
    def make(*blocks):
        world = PaletteWorld.filled(Box((0, 0, 0), (1, len(blocks), 1)))
        for i, block in enumerate(blocks):
            if isinstance(block, str):
                block = Block(block)
            world.setBlock((0, len(blocks) - 1 - i, 0), block)
        return world
    return make


@pytest.fixture
def flatWorld():
    """A 40x8x40 world with stone at y=0..3 and air at y=4..7."""
    world = PaletteWorld.filled(Box((0, 0, 0), (40, 8, 40)))
    world.fill(Box((0, 0, 0), (40, 4, 40)), Block("stone"))
    return world
