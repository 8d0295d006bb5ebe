import pytest

from mightydoom.collision import Vec3
from mightydoom.scene import (
    BANNER_HEIGHT_SCALE,
    BannerType,
    MapPiece,
    floor_banner,
)


def test_banner_model_paths():
    spawn = floor_banner(Vec3(), BannerType.SPAWN, 0.3)
    blood = floor_banner(Vec3(), BannerType.BLOOD, 0.3)
    assert spawn.banner_type.model == "rom:/enemyFloorIntro.t3dm"
    assert blood.banner_type.model == "rom:/bloodSplatter.t3dm"


def test_banner_lies_on_floor():
    banner = floor_banner(Vec3(12.0, 33.0, -7.0), BannerType.BLOOD, 0.2)
    assert banner.position == Vec3(12.0, 0.0, -7.0)
    assert banner.banner_type is BannerType.BLOOD


def test_banner_scale_keeps_height():
    banner = floor_banner(Vec3(), BannerType.SPAWN, 0.25)
    assert banner.scale == (0.25, BANNER_HEIGHT_SCALE, 0.25)


@pytest.mark.parametrize("scale", [0.0, -0.1])
def test_non_positive_scale_rejected(scale):
    with pytest.raises(ValueError):
        floor_banner(Vec3(), BannerType.BLOOD, scale)


def test_map_default_position():
    assert MapPiece("rom:/map.t3dm").position == Vec3(0.0, 0.0, -10.0)


def test_footprint_centred_on_position():
    piece = MapPiece("rom:/mapWall.t3dm", position=Vec3(4.0, 0.0, 6.0), half_size=50.0)
    min_x, min_z, max_x, max_z = piece.footprint()
    assert (min_x + max_x) / 2 == pytest.approx(piece.position.x)
    assert (min_z + max_z) / 2 == pytest.approx(piece.position.z)
    assert max_x - min_x == pytest.approx(2 * piece.half_size)