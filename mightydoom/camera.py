"""The game camera: top-down or over-the-shoulder, with projection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

from mightydoom.collision import Vec3

TOP_DOWN_HEIGHT = 180.0
BEHIND_TARGET_SHIFT = 20.0
BEHIND_HEIGHT = 45.0
BEHIND_DISTANCE = 65.0

SCREEN_WIDTH = 320
SCREEN_HEIGHT = 240


class CameraMode(Enum):
    """How the camera follows the player."""

    TOP_DOWN = auto()
    BEHIND_PLAYER = auto()


def _dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def _normalized(v: Vec3) -> Vec3:
    length = v.length()
    if length == 0.0:
        raise ValueError("cannot normalise a zero vector")
    return v * (1.0 / length)


@dataclass
class Camera:
    """A perspective camera looking from ``position`` at ``target``."""

    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 125.0, 135.0))
    target: Vec3 = field(default_factory=Vec3)
    mode: CameraMode = CameraMode.TOP_DOWN
    up: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    fov_degrees: float = 85.0
    near: float = 10.0
    far: float = 150.0
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT

    def update(self, player_pos: Vec3, rotation_y: float) -> None:
        """Follow the player according to the current mode."""
        target = player_pos
        if self.mode is CameraMode.TOP_DOWN:
            self.position = Vec3(target.x, target.y + TOP_DOWN_HEIGHT, target.z)
            self.up = Vec3(0.0, 0.0, -1.0)
        else:
            target = Vec3(target.x, target.y, target.z - BEHIND_TARGET_SHIFT)
            self.position = Vec3(
                target.x, target.y + BEHIND_HEIGHT, target.z + BEHIND_DISTANCE
            )
            self.up = Vec3(0.0, 1.0, 0.0)
        self.target = target

    def toggle_mode(self) -> None:
        """Switch between the top-down and behind-the-player views."""
        self.mode = (
            CameraMode.BEHIND_PLAYER
            if self.mode is CameraMode.TOP_DOWN
            else CameraMode.TOP_DOWN
        )

    def world_to_screen(self, point: Vec3) -> Vec3 | None:
        """Project a world point to screen pixels; z holds the view depth.

        Returns ``None`` for points at or behind the camera.
        """
        forward = _normalized(self.target - self.position)
        right = _normalized(_cross(forward, self.up))
        true_up = _cross(right, forward)

        rel = point - self.position
        depth = _dot(rel, forward)
        if depth <= 0.0:
            return None
        focal = 1.0 / math.tan(math.radians(self.fov_degrees) / 2.0)
        aspect = self.width / self.height
        ndc_x = _dot(rel, right) * focal / aspect / depth
        ndc_y = _dot(rel, true_up) * focal / depth
        return Vec3(
            (ndc_x + 1.0) * self.width / 2.0,
            (1.0 - ndc_y) * self.height / 2.0,
            depth,
        )