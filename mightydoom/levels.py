"""Level layouts: where the player and the zombies start."""

from __future__ import annotations

from dataclasses import dataclass

from mightydoom.collision import Vec3

MAX_ZOMBIES = 16


@dataclass(frozen=True)
class SpawnData:
    """A starting position and facing."""

    position: Vec3
    rotation_y: float = 0.0


@dataclass(frozen=True)
class LevelData:
    """The spawn points of one level."""

    player: SpawnData
    zombies: tuple[SpawnData, ...] = ()

    def __post_init__(self) -> None:
        if len(self.zombies) > MAX_ZOMBIES:
            raise ValueError(
                f"a level holds at most {MAX_ZOMBIES} zombies, got {len(self.zombies)}"
            )

    @property
    def zombie_count(self) -> int:
        """Number of zombies the level starts with."""
        return len(self.zombies)


_PLAYER_START = SpawnData(Vec3(0.0, 0.15, 104.0), 3.1416)

LEVEL_1 = LevelData(
    player=_PLAYER_START,
    zombies=(
        SpawnData(Vec3(0.0, 0.15, -96.0), 0.0),
        SpawnData(Vec3(82.0, 0.15, -123.0), 0.0),
        SpawnData(Vec3(-87.0, 0.15, -123.0), 0.0),
    ),
)

LEVEL_2 = LevelData(
    player=_PLAYER_START,
    zombies=(SpawnData(Vec3(0.0, 0.15, 32.0), 0.0),),
)

ALL_LEVELS: tuple[LevelData, ...] = (LEVEL_1, LEVEL_2)
TOTAL_LEVELS = len(ALL_LEVELS)


def level_at(index: int) -> LevelData:
    """Return the level at ``index``, wrapping around after the last one."""
    return ALL_LEVELS[index % TOTAL_LEVELS]