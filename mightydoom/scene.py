"""Static scene pieces: floor banners and map sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mightydoom.collision import Vec3

BANNER_HEIGHT_SCALE = 0.3
SPAWN_BANNER_SCALE = 0.3
MAP_SCALE = 0.3
MAP_HALF_SIZE = 140.0


class BannerType(Enum):
    """Kinds of decal drawn flat on the floor."""

    SPAWN = "rom:/enemyFloorIntro.t3dm"
    BLOOD = "rom:/bloodSplatter.t3dm"

    @property
    def model(self) -> str:
        """Asset path of the banner's model."""
        return self.value


@dataclass(frozen=True)
class FloorBanner:
    """A banner placed on the floor."""

    position: Vec3
    banner_type: BannerType
    scale: tuple[float, float, float]


def floor_banner(position: Vec3, banner_type: BannerType, scale: float) -> FloorBanner:
    """Place a banner of horizontal ``scale`` on the floor under ``position``."""
    if scale <= 0.0:
        raise ValueError(f"banner scale must be positive, got {scale}")
    return FloorBanner(
        position=Vec3(position.x, 0.0, position.z),
        banner_type=banner_type,
        scale=(scale, BANNER_HEIGHT_SCALE, scale),
    )


@dataclass
class MapPiece:
    """One section of the arena model, placed in the world."""

    model_path: str
    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -10.0))
    scale: float = MAP_SCALE
    half_size: float = MAP_HALF_SIZE

    def footprint(self) -> tuple[float, float, float, float]:
        """Floor rectangle as ``(min_x, min_z, max_x, max_z)``."""
        return (
            self.position.x - self.half_size,
            self.position.z - self.half_size,
            self.position.x + self.half_size,
            self.position.z + self.half_size,
        )