"""The tutorial run: one frame of game logic and what it shows."""

from __future__ import annotations

from dataclasses import dataclass, field

from mightydoom.bullets import Bullet
from mightydoom.camera import Camera
from mightydoom.collision import Vec3
from mightydoom.level_update import LevelProgress
from mightydoom.levels import ALL_LEVELS, LevelData
from mightydoom.menu import Controls
from mightydoom.player import Player
from mightydoom.scene import SPAWN_BANNER_SCALE, BannerType, FloorBanner, floor_banner
from mightydoom.state import GameState
from mightydoom.zombie import Zombie, update_all

TUTORIAL_TRACK = "Tutorial_5_5_11_5.wav64"
FRAME_TIME = 1.0 / 60.0
SPAWN_BANNER_SECONDS = 4.0
BLOOD_SHRINK_RATE = 0.01
ARROW_COUNT = 3
ARROW_RATE = 3.0
ARROW_POSITIONS = tuple(Vec3(0.0, 0.15, -155.0 + i * 20.0) for i in range(ARROW_COUNT))
ARROW_MODEL = "rom:/arrow.t3dm"
MAP_MODEL = "rom:/map.t3dm"
WALL_MODEL = "rom:/mapWall.t3dm"
PORTAL_MODEL = "rom:/mapPortal.t3dm"


def _spawn_zombies(level: LevelData) -> list[Zombie]:
    return [Zombie(spawn.position, rotation_y=spawn.rotation_y) for spawn in level.zombies]


@dataclass
class Tutorial:
    """State of a tutorial session, advanced one frame at a time."""

    now: float = 0.0
    levels: tuple[LevelData, ...] = ALL_LEVELS
    progress: LevelProgress = field(init=False)
    player: Player = field(init=False)
    zombies: list[Zombie] = field(init=False)
    bullet: Bullet = field(default_factory=Bullet, init=False)
    camera: Camera = field(default_factory=Camera, init=False)
    enemy_count: int = field(init=False)
    level_start_time: float = field(init=False)
    last_time: float = field(init=False)
    black_frame: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.progress = LevelProgress(levels=self.levels)
        level = self.progress.level
        self.player = Player(position=level.player.position, rotation_y=level.player.rotation_y)
        self.zombies = _spawn_zombies(level)
        self.enemy_count = len(self.zombies)
        self.level_start_time = self.now
        self.last_time = self.now - FRAME_TIME

    @property
    def level(self) -> LevelData:
        """The level being played."""
        return self.progress.level

    @property
    def portal_open(self) -> bool:
        """True once every enemy of the level is dead."""
        return self.enemy_count == 0

    @property
    def map_models(self) -> tuple[str, str]:
        """Map models to draw, in draw order."""
        if self.portal_open:
            return MAP_MODEL, PORTAL_MODEL
        return WALL_MODEL, MAP_MODEL

    def step(self, controls: Controls, now: float) -> GameState | None:
        """Advance one frame at time ``now``; return the next state, if any."""
        delta_time = now - self.last_time
        self.last_time = now

        result = self.progress.update(self.player, self.zombies, self.enemy_count)
        self.enemy_count = result.enemy_count
        if result.skip_frame:
            self.black_frame = True
            self.level_start_time = now
            return None
        self.black_frame = False

        self.player.update(delta_time, controls.stick_x, controls.stick_y, self.zombies)
        self.enemy_count -= self.bullet.update(
            self.player.position, self.player.rotation_y, self.zombies, now
        )
        update_all(self.zombies, self.player.position, delta_time)

        self.camera.update(self.player.position, self.player.rotation_y)
        if controls.l:
            self.camera.toggle_mode()

        return GameState.MENU if controls.start else None

    def banners(self, now: float) -> list[FloorBanner]:
        """Floor banners to draw at ``now``.

        Each call shrinks the blood of dead zombies by the time since death;
        a zombie whose blood has shrunk away shows no banner at all.
        """
        result: list[FloorBanner] = []
        spawns = self.level.zombies
        for zombie, spawn in zip(self.zombies, spawns):
            if not zombie.alive:
                zombie.blood_scale -= BLOOD_SHRINK_RATE * (now - zombie.blood_time)
                if zombie.blood_scale <= 0.0:
                    continue
                result.append(floor_banner(zombie.position, BannerType.BLOOD, zombie.blood_scale))
            if now - self.level_start_time < SPAWN_BANNER_SECONDS:
                result.append(floor_banner(spawn.position, BannerType.SPAWN, SPAWN_BANNER_SCALE))
        return result

    def arrow_index(self, now: float) -> int | None:
        """Which exit arrow is lit, counting down; ``None`` while enemies remain."""
        if not self.portal_open:
            return None
        return ARROW_COUNT - 1 - (int(now * ARROW_RATE) % ARROW_COUNT)