#!/usr/bin/env python3

from typing import Optional, Tuple
import sys
import logging

import cloup
from termcolor import colored
from gdpc.vector_tools import Box

from fakeblock.util import eprint, timeAndLog
from fakeblock.constants import DISPLAY_ZONE_RADIUS, ERROR_PREFIX, FILENAME_STYLE
from fakeblock.palette_tools import blockTupleToString, blockToTuple
from fakeblock.styles import VisualizationStyle
from fakeblock.world import loadDataset
from fakeblock.visualization import Boundary, FakeBlockVisualization


# ==================================================================================================


def make_color_formatter(fg=None, bg=None, attrs=None):
    return logging.Formatter(colored("[%(asctime)s] [%(levelname)s]:", fg, bg, attrs) + " %(message)s")

COLOR_FORMATTERS = {
    logging.DEBUG:    make_color_formatter("green"),
    logging.INFO:     make_color_formatter("cyan"),
    logging.WARNING:  make_color_formatter("yellow"),
    logging.ERROR:    make_color_formatter("red"),
    logging.CRITICAL: make_color_formatter("red", attrs=["bold"]),
}

class CustomLoggingFormatter(logging.Formatter):
    def format(self, record):
        formatter = COLOR_FORMATTERS.get(record.levelno)
        return formatter.format(record)


logger = logging.getLogger()


def setupLogging(verbose: bool):
    consoleHandler = logging.StreamHandler()
    consoleHandler.setFormatter(CustomLoggingFormatter())
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.addHandler(consoleHandler)


# ==================================================================================================


@cloup.command(context_settings={"show_default": True})
@cloup.option_group(
    "World",
    cloup.option("--dataset-dir", type=cloup.Path(exists=True, file_okay=False), required=True, help="Directory containing blocks.npy and palette.json."),
    cloup.option("--offset", type=(int, int), default=(0, 0), help="World X and Z of the dataset's first block."),
    cloup.option("--bottom-y", type=int, default=0, help="World Y of the dataset's bottom layer."),
    cloup.option("--sample", type=int, default=0, help="Sample index, for datasets containing multiple samples."),
)
@cloup.option_group(
    "Boundary",
    cloup.option("--first", type=(int, int, int), required=True, help="First corner of the region (inclusive)."),
    cloup.option("--last",  type=(int, int, int), required=True, help="Opposite corner of the region (inclusive)."),
    cloup.option("--style", type=cloup.Choice([style.value for style in VisualizationStyle]), default=VisualizationStyle.CLAIM.value, help="Visualization style."),
)
@cloup.option_group(
    "Viewer",
    cloup.option("--from", "visualize_from", type=(int, int, int), required=True, help="Position the visualization is started from."),
    cloup.option("--feet", type=(int, int, int), default=None, help="Position of the viewer's feet. Defaults to --from."),
    cloup.option("--height", type=int, default=None, help="Y at which standard boundaries are outlined. Defaults to the Y of --from."),
    cloup.option("--radius", type=int, default=DISPLAY_ZONE_RADIUS, help="Display radius around --from."),
)
@cloup.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(
    dataset_dir:    str,
    offset:         Tuple[int, int],
    bottom_y:       int,
    sample:         int,
    first:          Tuple[int, int, int],
    last:           Tuple[int, int, int],
    style:          str,
    visualize_from: Tuple[int, int, int],
    feet:           Optional[Tuple[int, int, int]],
    height:         Optional[int],
    radius:         int,
    verbose:        bool,
):
    """Prints the fake blocks that outline a region of a dataset world.

    \b
    Each output line has the form:
      X Y Z ORIGINAL_BLOCK -> FAKE_BLOCK
    """

    setupLogging(verbose)

    try:
        with timeAndLog(logger, f"Loading {dataset_dir}...", "Dataset loaded in %.2fs", level=logging.DEBUG):
            world = loadDataset(dataset_dir, (offset[0], bottom_y, offset[1]), sample)
    except FileNotFoundError as e:
        eprint(ERROR_PREFIX + f"Missing file {colored(e.filename, **FILENAME_STYLE)}.")
        sys.exit(1)
    except ValueError as e: # PaletteError, or an out-of-range sample index
        eprint(ERROR_PREFIX + f"Invalid dataset {colored(dataset_dir, **FILENAME_STYLE)}: {e}")
        sys.exit(1)

    region = Box.between(first, last)

    visualization = FakeBlockVisualization(world, visualize_from, height, radius)
    instructions = visualization.render([Boundary(region, VisualizationStyle(style))], feet)

    for instruction in instructions:
        x, y, z = instruction.position
        print(f"{x} {y} {z} {blockTupleToString(blockToTuple(instruction.originalBlock))} -> {blockTupleToString(blockToTuple(instruction.fakeBlock))}")

    logger.info("Rendered %i fake blocks.", len(instructions))


def main():
    cli() # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
