AIR_BLOCKS = ["air", "cave_air", "void_air"]

LIQUID_BLOCKS = ["water", "lava"]

# Blocks that only exist inside water and are considered part of the liquid they are in.
LIQUID_ADJACENT_BLOCKS = ["bubble_column", "kelp", "kelp_plant", "seagrass", "tall_seagrass"]

# Thin architectural blocks that do not hide what is below them.
# Fences, fence gates, (wall/hanging) signs and walls.
THIN_BLOCK_SUFFIXES = ("_fence", "_fence_gate", "_sign", "_wall")

# Blocks that do not occlude the view of the block below them.
TRANSPARENT_BLOCKS = [
    "grass", "short_grass", "tall_grass", "fern", "large_fern", "dead_bush",
    "dandelion", "poppy", "blue_orchid", "allium", "azure_bluet", "oxeye_daisy", "cornflower",
    "lily_of_the_valley", "sunflower", "lilac", "rose_bush", "peony",
    "brown_mushroom", "red_mushroom",
    "torch", "wall_torch", "redstone_torch", "redstone_wall_torch", "soul_torch", "soul_wall_torch",
    "redstone_wire", "repeater", "comparator", "lever", "tripwire", "tripwire_hook",
    "rail", "powered_rail", "detector_rail", "activator_rail",
    "ladder", "vine", "sugar_cane", "nether_portal", "flower_pot",
    "wheat", "carrots", "potatoes", "beetroots", "nether_wart", "sweet_berry_bush",
    "glass", "glass_pane", "cobweb", "end_rod", "light",
]
TRANSPARENT_BLOCK_SUFFIXES = ("_sapling", "_carpet", "_button", "_pressure_plate", "_stained_glass", "_stained_glass_pane", "_leaves", "_tulip")

SLAB_TYPES   = ["top", "bottom", "double"]
STAIR_HALVES = ["top", "bottom"]
STAIR_SHAPES = ["straight", "inner_left", "inner_right", "outer_left", "outer_right"]

# Substrings that identify slab- and stair-like blocks by name.
PARTIAL_HEIGHT_NAME_PATTERNS = ["slab", "stairs", "step"]
