"""Zombies: chasing the player, attacking, and their health bars."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from mightydoom.camera import Camera, CameraMode
from mightydoom.collision import Vec3, check_overlap

ZOMBIE_COLLISION_RADIUS = 20.0
ATTACK_RANGE = ZOMBIE_COLLISION_RADIUS + 10.0
ATTACK_ANIM_LENGTH = 2.9
ATTACK_ANIM_READY = 0.666666
ATTACK_ANIM_FINISHING = 2.266666
WALK_ANIM_LENGTH = 1.0

MAX_HEALTH = 5
ZOMBIE_SPEED = 0.3
BLOOD_START_SCALE = 0.3

HEALTH_BAR_WIDTH = 30.0
HEALTH_BAR_HEIGHT = 4.0
HEALTH_BAR_BACKGROUND = (50, 50, 50)
TOP_DOWN_BAR_OFFSET = 60.0
BEHIND_BAR_OFFSET = 50.0


@dataclass
class Animation:
    """Playback state of one animation clip."""

    duration: float
    looping: bool = True
    playing: bool = True
    speed: float = 1.0
    time: float = 0.0

    def __post_init__(self) -> None:
        if self.duration <= 0.0:
            raise ValueError(f"animation duration must be positive, got {self.duration}")

    def start(self) -> None:
        """Rewind to the beginning and play."""
        self.time = 0.0
        self.playing = True

    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds; a one-shot clip stops at its end."""
        if not self.playing:
            return
        self.time += delta_time * self.speed
        if self.time >= self.duration:
            if self.looping:
                self.time %= self.duration
            else:
                self.time = self.duration
                self.playing = False


@dataclass(frozen=True)
class HealthBar:
    """A screen-space health bar: background box and a partial fill."""

    x: float
    y: float
    width: float
    height: float
    fill: float
    color: tuple[int, int, int]
    background: tuple[int, int, int] = HEALTH_BAR_BACKGROUND


def _walk_animation() -> Animation:
    return Animation(WALK_ANIM_LENGTH)


def _attack_animation() -> Animation:
    return Animation(ATTACK_ANIM_LENGTH, looping=False, playing=False)


@dataclass
class Zombie:
    """An enemy that walks towards the player and punches when close."""

    position: Vec3
    rotation_y: float = 0.0
    speed: float = ZOMBIE_SPEED
    health: int = MAX_HEALTH
    alive: bool = True
    blood_time: float = 0.0
    blood_scale: float = BLOOD_START_SCALE
    is_attacking: bool = False
    attack_timer: float = 0.0
    attack_blending_ratio: float = 0.0
    anim_walk: Animation = field(default_factory=_walk_animation)
    anim_attack: Animation = field(default_factory=_attack_animation)

    def _blocked(self, next_pos: Vec3, player_pos: Vec3, zombies: Sequence[Zombie]) -> bool:
        if check_overlap(next_pos, player_pos, ZOMBIE_COLLISION_RADIUS):
            return True
        return any(
            check_overlap(next_pos, other.position, ZOMBIE_COLLISION_RADIUS)
            for other in zombies
            if other is not self and other.health > 0
        )

    def update(self, player_pos: Vec3, delta_time: float, zombies: Sequence[Zombie]) -> None:
        """Move towards the player, then run the walk/attack animations."""
        dx = player_pos.x - self.position.x
        dz = player_pos.z - self.position.z
        dist = math.sqrt(dx * dx + dz * dz)

        can_move = False
        if dist > 1.0:
            dx /= dist
            dz /= dist
            next_pos = Vec3(
                self.position.x + dx * self.speed,
                self.position.y,
                self.position.z + dz * self.speed,
            )
            if not self._blocked(next_pos, player_pos, zombies):
                can_move = True
                self.position = next_pos
                self.rotation_y = math.atan2(dx, dz)

        if dist <= ATTACK_RANGE and not self.is_attacking and not self.anim_attack.playing:
            self.anim_attack.start()
            self.is_attacking = True
            self.attack_timer = 0.0
            self.attack_blending_ratio = 0.0

        if self.is_attacking:
            attack = self.anim_attack
            if attack.time < ATTACK_ANIM_READY and self.attack_blending_ratio < 1.0:
                self.attack_blending_ratio = min(
                    1.0, self.attack_blending_ratio + delta_time / ATTACK_ANIM_READY
                )
            if attack.time > ATTACK_ANIM_FINISHING:
                self.attack_blending_ratio = max(
                    0.0,
                    self.attack_blending_ratio
                    - delta_time / (ATTACK_ANIM_LENGTH - ATTACK_ANIM_FINISHING),
                )
            self.anim_walk.update(delta_time)
            attack.update(delta_time)
            if not attack.playing:
                self.is_attacking = False
        elif can_move:
            self.anim_walk.update(delta_time)

    def health_bar(self, camera: Camera) -> HealthBar | None:
        """The bar above the zombie's head, or ``None`` if it is not drawn."""
        if not self.alive or self.health <= 0:
            return None
        offset = (
            TOP_DOWN_BAR_OFFSET
            if camera.mode is CameraMode.TOP_DOWN
            else BEHIND_BAR_OFFSET
        )
        world = Vec3(self.position.x, self.position.y + offset, self.position.z)
        screen = camera.world_to_screen(world)
        if screen is None:
            return None
        pct = self.health / MAX_HEALTH
        return HealthBar(
            x=screen.x - HEALTH_BAR_WIDTH / 2.0,
            y=screen.y,
            width=HEALTH_BAR_WIDTH,
            height=HEALTH_BAR_HEIGHT,
            fill=pct,
            color=(int(255 * (1.0 - pct)), int(255 * pct), 0),
        )


def update_all(zombies: Sequence[Zombie], player_pos: Vec3, delta_time: float) -> None:
    """Update every living zombie."""
    for zombie in zombies:
        if zombie.alive:
            zombie.update(player_pos, delta_time, zombies)