"""Level completion: the exit goal, the black-screen pause and the next level."""

from __future__ import annotations

from dataclasses import dataclass, field

from mightydoom.levels import ALL_LEVELS, LevelData
from mightydoom.player import Player
from mightydoom.zombie import BLOOD_START_SCALE, MAX_HEALTH, Zombie

GOAL_MIN_X = -30.0
GOAL_MAX_X = 30.0
GOAL_MIN_Z = -140.0
GOAL_MAX_Z = -130.0
RESET_FRAMES = 15


@dataclass(frozen=True)
class LevelUpdate:
    """Outcome of one frame of level progress.

    ``skip_frame`` asks for a black frame instead of the game; ``level`` is
    the newly entered level, or ``None`` if the level did not change.
    """

    skip_frame: bool
    enemy_count: int
    level: LevelData | None = None


def _in_goal(player: Player) -> bool:
    return (
        GOAL_MIN_X <= player.position.x <= GOAL_MAX_X
        and GOAL_MIN_Z <= player.position.z <= GOAL_MAX_Z
    )


@dataclass
class LevelProgress:
    """Tracks the current level and the pause before the next one."""

    levels: tuple[LevelData, ...] = ALL_LEVELS
    index: int = 0
    reset_pending: bool = False
    reset_timer: int = 0
    _frames: int = field(default=RESET_FRAMES, repr=False)

    def __post_init__(self) -> None:
        if not self.levels:
            raise ValueError("at least one level is required")

    @property
    def level(self) -> LevelData:
        """The level currently being played."""
        return self.levels[self.index]

    def update(
        self, player: Player, zombies: list[Zombie], enemy_count: int
    ) -> LevelUpdate:
        """Run one frame; on entering the next level, reset player and zombies.

        The zombie list is changed in place to hold exactly the new level's
        zombies.
        """
        if not self.reset_pending and enemy_count == 0 and _in_goal(player):
            self.reset_pending = True
            self.reset_timer = self._frames

        if not self.reset_pending:
            return LevelUpdate(skip_frame=False, enemy_count=enemy_count)

        if self.reset_timer > 0:
            self.reset_timer -= 1
            return LevelUpdate(skip_frame=True, enemy_count=enemy_count)

        self.index = (self.index + 1) % len(self.levels)
        level = self.level

        player.position = level.player.position
        player.rotation_y = level.player.rotation_y
        player.speed = 0.0
        player.move_dir = type(player.move_dir)()

        for i, spawn in enumerate(level.zombies):
            if i >= len(zombies):
                zombies.append(Zombie(spawn.position))
            zombie = zombies[i]
            zombie.position = spawn.position
            zombie.rotation_y = spawn.rotation_y
            zombie.health = MAX_HEALTH
            zombie.alive = True
            zombie.blood_scale = BLOOD_START_SCALE
        del zombies[level.zombie_count:]

        self.reset_pending = False
        return LevelUpdate(
            skip_frame=False, enemy_count=level.zombie_count, level=level
        )