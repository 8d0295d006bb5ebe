"""The single bullet the player keeps firing."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from mightydoom.collision import Vec3
from mightydoom.zombie import Zombie

BOX_SIZE = 140.0
SPEED = 1.5
ZOMBIE_HIT_RADIUS2 = 50.0
BULLET_HEIGHT = 20.0
BULLET_SCALE = 0.035
MODEL_PATH = "rom:/bullet.t3dm"


@dataclass
class Bullet:
    """A bullet that flies straight and returns to the player on a hit or exit."""

    position: Vec3 = field(default_factory=lambda: Vec3(150.0, 0.0, 150.0))
    rotation_y: float = 0.0
    direction: Vec3 = field(default_factory=Vec3)

    def reset(self, player_pos: Vec3, rot_y: float) -> None:
        """Put the bullet back at the player, aimed along ``rot_y``."""
        self.position = player_pos
        self.direction = Vec3(math.sin(rot_y), 0.0, math.cos(rot_y))
        self.rotation_y = rot_y

    def _out_of_bounds(self) -> bool:
        return not (
            -BOX_SIZE <= self.position.x <= BOX_SIZE
            and -BOX_SIZE <= self.position.z <= BOX_SIZE
        )

    def update(
        self,
        player_pos: Vec3,
        rot_y: float,
        zombies: Sequence[Zombie],
        now: float,
    ) -> int:
        """Advance one frame and return how many zombies the bullet killed.

        A killed zombie records ``now`` as its time of death.
        """
        if self._out_of_bounds():
            self.reset(player_pos, rot_y)

        kills = 0
        for zombie in zombies:
            if not zombie.alive:
                continue
            dx = self.position.x - zombie.position.x
            dz = self.position.z - zombie.position.z
            if dx * dx + dz * dz <= ZOMBIE_HIT_RADIUS2:
                zombie.health -= 1
                if zombie.health <= 0:
                    zombie.alive = False
                    zombie.blood_time = now
                    kills += 1
                self.reset(player_pos, rot_y)

        self.position = Vec3(
            self.position.x + self.direction.x * SPEED,
            self.position.y,
            self.position.z + self.direction.z * SPEED,
        )
        return kills