import pytest
from gdpc import Block

from fakeblock.materials import (
    TransparencyMode, SnapOverride,
    isLiquidLike, isPartialHeightShape, isPureWater, isTransparentFromAbove, isWaterLike, resolveOverride,
)
from fakeblock.minecraft_util import TRANSPARENT_BLOCKS


OPAQUE      = TransparencyMode.WATER_OPAQUE
TRANSPARENT = TransparencyMode.WATER_TRANSPARENT
BOTH_MODES  = [OPAQUE, TRANSPARENT]


def test_mode_from_submersion():
    assert TransparencyMode.fromSubmerged(True)  is TRANSPARENT
    assert TransparencyMode.fromSubmerged(False) is OPAQUE
    assert TRANSPARENT.waterTransparent
    assert not OPAQUE.waterTransparent


class TestLiquidLike:
    @pytest.mark.parametrize("mode", BOTH_MODES)
    @pytest.mark.parametrize("blockId", ["water", "lava", "minecraft:water", "kelp", "kelp_plant", "seagrass", "tall_seagrass", "bubble_column"])
    def test_liquids(self, blockId, mode):
        assert isLiquidLike(Block(blockId), mode)

    @pytest.mark.parametrize("mode", BOTH_MODES)
    @pytest.mark.parametrize("blockId", ["air", "stone", "ice", "oak_fence"])
    def test_non_liquids(self, blockId, mode):
        assert not isLiquidLike(Block(blockId), mode)

    def test_waterlogged_blocks_only_count_when_water_is_transparent(self):
        block = Block("oak_slab", {"type": "bottom", "waterlogged": "true"})
        assert isLiquidLike(block, TRANSPARENT)
        assert not isLiquidLike(block, OPAQUE)

    def test_dry_blocks_with_waterlogged_state(self):
        assert not isLiquidLike(Block("oak_fence", {"waterlogged": "false"}), TRANSPARENT)


def test_pure_water():
    assert isPureWater(Block("water"))
    assert isPureWater(Block("minecraft:water", {"level": "3"}))
    assert not isPureWater(Block("lava"))
    assert not isPureWater(Block("kelp"))


def test_water_like():
    assert isWaterLike(Block("minecraft:water", {"level": "3"}))
    assert isWaterLike(Block("seagrass"))
    assert isWaterLike(Block("oak_stairs", {"waterlogged": "true"}))
    assert not isWaterLike(Block("oak_stairs", {"waterlogged": "false"}))
    assert not isWaterLike(Block("lava"))


class TestPartialHeightShape:
    @pytest.mark.parametrize("block", [
        Block("oak_slab", {"type": "bottom"}),
        Block("stone_brick_stairs", {"facing": "north", "half": "top", "shape": "outer_left"}),
        Block("smooth_stone_slab"),  # states omitted
        Block("modded_granite_step"),
        Block("mystery_block", {"type": "top"}),
        Block("mystery_block", {"half": "bottom", "shape": "straight"}),
    ])
    def test_partial_height_shapes(self, block):
        assert isPartialHeightShape(block)

    @pytest.mark.parametrize("block", [
        Block("stone"),
        Block("chest", {"type": "single"}),
        Block("oak_trapdoor", {"half": "top"}),
        Block("rail", {"shape": "north_south"}),
    ])
    def test_full_shapes(self, block):
        assert not isPartialHeightShape(block)


class TestOverrides:
    @pytest.mark.parametrize("mode", BOTH_MODES)
    def test_lava_is_column_surface_in_both_modes(self, mode):
        assert resolveOverride(Block("lava"), mode) is SnapOverride.COLUMN_SURFACE

    @pytest.mark.parametrize("blockId, override", [
        ("lily_pad", SnapOverride.SELF),
        ("minecraft:ice", SnapOverride.SELF),
        ("cactus", SnapOverride.ABOVE),
        ("fire", SnapOverride.TWO_ABOVE),
        ("kelp_plant", SnapOverride.COLUMN_SEABED),
    ])
    def test_table(self, blockId, override):
        assert resolveOverride(Block(blockId), OPAQUE) is override

    def test_no_override(self):
        assert resolveOverride(Block("stone"), OPAQUE) is None
        assert resolveOverride(Block("water"), TRANSPARENT) is None


class TestTransparentFromAbove:
    @pytest.mark.parametrize("mode", BOTH_MODES)
    @pytest.mark.parametrize("blockId", [
        "air", "cave_air", "oak_fence", "spruce_fence_gate", "oak_sign", "oak_wall_sign",
        "cobblestone_wall", "poppy", "oak_sapling", "white_carpet", "torch", "glass",
    ])
    def test_transparent(self, blockId, mode):
        assert isTransparentFromAbove(Block(blockId), mode)

    @pytest.mark.parametrize("mode", BOTH_MODES)
    @pytest.mark.parametrize("block", [
        Block("stone"),
        Block("grass_block"),
        Block("snow", {"layers": "1"}),
        Block("lily_pad"),
        Block("fire"),
        Block("glass_slab_like_block", {"type": "bottom"}),
    ])
    def test_opaque(self, block, mode):
        assert not isTransparentFromAbove(block, mode)

    @pytest.mark.parametrize("mode", BOTH_MODES)
    def test_every_listed_transparent_block_is_transparent(self, mode):
        opaque = [name for name in TRANSPARENT_BLOCKS if not isTransparentFromAbove(Block(name), mode)]
        assert opaque == []

    @pytest.mark.parametrize("blockId", ["water", "lava", "kelp"])
    def test_liquids_follow_the_mode(self, blockId):
        assert isTransparentFromAbove(Block(blockId), TRANSPARENT)
        assert not isTransparentFromAbove(Block(blockId), OPAQUE)
