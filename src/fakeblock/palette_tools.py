from typing import Dict, FrozenSet, List, Tuple
import json

from gdpc import Block


BlockTuple = Tuple[str, Dict[str, str]]
"""(basename, states)"""

HashableBlockTuple = Tuple[str, FrozenSet[Tuple[str, str]]]
"""Hashable version of BlockTuple, with <states> as a frozenset"""

Palette = List[BlockTuple]


class PaletteError(ValueError):
    """A block array does not match its palette."""


def loadPalette(filename: str):
    with open(filename, "r", encoding="utf-8") as f:
        rawPalette = json.load(f)
    palette: Palette = [tuple(block) for block in rawPalette] # Convert block lists to block tuples
    return palette


def savePalette(filename: str, palette: Palette):
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(palette, f, separators=(",", ":"))


def blockTupleToString(blockTuple: BlockTuple):
    name =  blockTuple[0]
    blockDataStr = "[" + ", ".join(f"{key}={value}" for key, value in blockTuple[1].items()) + "]" if len(blockTuple[1]) > 0 else ""
    return name + blockDataStr


def baseName(blockId: str):
    """Returns <blockId> without its "minecraft:" namespace"""
    return blockId[len("minecraft:"):] if blockId.startswith("minecraft:") else blockId


def blockToTuple(block: Block) -> BlockTuple:
    return (baseName(block.id), dict(block.states))


def tupleToBlock(blockTuple: BlockTuple):
    return Block(blockTuple[0], dict(blockTuple[1]))


def hashable(blockTuple: BlockTuple) -> HashableBlockTuple:
    return (blockTuple[0], frozenset(blockTuple[1].items()))


def reconstructPaletteLookup(palette: Palette):
    """Reconstructs a palette lookup dict from a palette."""
    return { hashable(blockTuple): i for i, blockTuple in enumerate(palette) }
