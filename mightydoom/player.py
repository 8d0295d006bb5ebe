"""The player character: stick movement, collisions and arena limits."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from mightydoom.camera import Camera
from mightydoom.collision import Vec3, check_overlap
from mightydoom.zombie import (
    HEALTH_BAR_BACKGROUND,
    HEALTH_BAR_HEIGHT,
    HEALTH_BAR_WIDTH,
    Animation,
    HealthBar,
    Zombie,
)

SLAYER_COLLISION_RADIUS = 20.0
BOX_SIZE = 140.0

STICK_SCALE = 0.05
DEADZONE = 0.15
TURN_RATE = 0.25
SPEED_FACTOR = 0.15
ACCELERATION = 0.15
FRICTION = 0.8
MAX_BLEND_SPEED = 0.51
WALK_BASE_SPEED = 0.15
HEALTH_BAR_OFFSET = 45.0

IDLE_ANIM_LENGTH = 1.0
WALK_ANIM_LENGTH = 1.0


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` to ``b``."""
    return a + (b - a) * t


def lerp_angle(a: float, b: float, t: float) -> float:
    """Interpolate between two angles in radians along the shorter arc."""
    full = math.pi * 2.0
    diff = math.fmod(b - a, full)
    short = math.fmod(diff * 2.0, full) - diff
    return a + short * t


@dataclass
class Player:
    """The slayer, moved by the analogue stick."""

    position: Vec3 = field(default_factory=Vec3)
    rotation_y: float = 0.0
    move_dir: Vec3 = field(default_factory=Vec3)
    speed: float = 0.0
    blend_factor: float = 0.0
    anim_idle: Animation = field(default_factory=lambda: Animation(IDLE_ANIM_LENGTH))
    anim_walk: Animation = field(default_factory=lambda: Animation(WALK_ANIM_LENGTH))

    def update(
        self,
        delta_time: float,
        stick_x: float,
        stick_y: float,
        zombies: Sequence[Zombie],
    ) -> None:
        """Steer with the stick, move unless a living zombie blocks the way."""
        new_dir = Vec3(stick_x * STICK_SCALE, 0.0, -stick_y * STICK_SCALE)
        stick_speed = new_dir.length()

        if stick_speed > DEADZONE:
            self.move_dir = Vec3(new_dir.x / stick_speed, 0.0, new_dir.z / stick_speed)
            new_angle = math.atan2(self.move_dir.x, self.move_dir.z)
            self.rotation_y = lerp_angle(self.rotation_y, new_angle, TURN_RATE)
            self.speed = lerp(self.speed, stick_speed * SPEED_FACTOR, ACCELERATION)
        else:
            self.speed *= FRICTION

        self.blend_factor = min(self.speed / MAX_BLEND_SPEED, 1.0)

        proposed = Vec3(
            self.position.x + self.move_dir.x * self.speed,
            self.position.y,
            self.position.z + self.move_dir.z * self.speed,
        )
        blocked = any(
            check_overlap(proposed, zombie.position, SLAYER_COLLISION_RADIUS)
            for zombie in zombies
            if zombie.alive
        )
        if not blocked:
            self.position = proposed

        self.position = Vec3(
            min(max(self.position.x, -BOX_SIZE), BOX_SIZE),
            self.position.y,
            min(max(self.position.z, -BOX_SIZE), BOX_SIZE),
        )

        self.anim_idle.update(delta_time)
        self.anim_walk.speed = self.blend_factor + WALK_BASE_SPEED
        self.anim_walk.update(delta_time)

    def health_bar(self, camera: Camera) -> HealthBar | None:
        """The empty bar above the player's head, or ``None`` if off-camera."""
        world = Vec3(
            self.position.x, self.position.y + HEALTH_BAR_OFFSET, self.position.z
        )
        screen = camera.world_to_screen(world)
        if screen is None:
            return None
        return HealthBar(
            x=screen.x - HEALTH_BAR_WIDTH / 2.0,
            y=screen.y,
            width=HEALTH_BAR_WIDTH,
            height=HEALTH_BAR_HEIGHT,
            fill=0.0,
            color=HEALTH_BAR_BACKGROUND,
        )