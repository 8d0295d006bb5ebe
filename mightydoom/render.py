"""Drawing of the title menu and the tutorial arena onto a pygame surface."""

from __future__ import annotations

import math

import pygame

from mightydoom.camera import Camera
from mightydoom.collision import Vec3
from mightydoom.game import (
    ARROW_POSITIONS,
    MAP_MODEL,
    PORTAL_MODEL,
    WALL_MODEL,
    Tutorial,
)
from mightydoom.level_update import GOAL_MAX_X, GOAL_MAX_Z, GOAL_MIN_X, GOAL_MIN_Z
from mightydoom.menu import MENU_ITEMS, MENU_SPACING, MENU_X, TITLE, Menu
from mightydoom.scene import SPAWN_BANNER_SCALE, BannerType, MapPiece
from mightydoom.zombie import HealthBar

BLACK = (0, 0, 0)
TITLE_COLOR = (255, 0, 0)
MENU_TEXT_COLOR = (255, 0, 0)
DEBUG_TEXT_COLOR = (255, 255, 255)
CURSOR_COLOR = (255, 64, 0)
CURSOR_SIZE = 12

FLOOR_COLOR = (224, 180, 96)
ARENA_COLOR = (150, 110, 60)
WALL_COLOR = (70, 60, 50)
PORTAL_COLOR = (60, 160, 255)
ARROW_COLOR = (255, 0, 0)
BLOOD_COLOR = (140, 0, 0)
SPAWN_COLOR = (90, 30, 120)
BULLET_COLOR = (255, 255, 0)
PLAYER_COLOR = (255, 255, 255)
ZOMBIE_COLOR = (200, 40, 40)

PLAYER_RADIUS = 8.0
ZOMBIE_RADIUS = 8.0
BULLET_RADIUS = 2.0
BANNER_RADIUS = 12.0
ARROW_TIP = 10.0
ARROW_HALF_WIDTH = 8.0
ARROW_BASE = 8.0
WALL_THICKNESS = 3

MENU_TEXT_X = 100
MENU_TEXT_Y = 100
TITLE_Y = 20
DEBUG_X = 16
DEBUG_Y = 216
DEBUG_LINE = 10

TITLE_FONT_SIZE = 24
MENU_FONT_SIZE = 20
DEBUG_FONT_SIZE = 12

_BANNER_COLORS = {BannerType.SPAWN: SPAWN_COLOR, BannerType.BLOOD: BLOOD_COLOR}

Point = tuple[int, int]


def _to_pixel(screen: Vec3) -> Point:
    return round(screen.x), round(screen.y)


def _project(camera: Camera, point: Vec3) -> Point | None:
    screen = camera.world_to_screen(point)
    return None if screen is None else _to_pixel(screen)


def _floor_polygon(
    camera: Camera, rect: tuple[float, float, float, float]
) -> list[Point] | None:
    min_x, min_z, max_x, max_z = rect
    corners = (
        Vec3(min_x, 0.0, min_z),
        Vec3(max_x, 0.0, min_z),
        Vec3(max_x, 0.0, max_z),
        Vec3(min_x, 0.0, max_z),
    )
    points = [_project(camera, corner) for corner in corners]
    if any(p is None for p in points):
        return None
    return points  # type: ignore[return-value]


class Renderer:
    """Draws menus and game frames; fonts are created on first use."""

    def __init__(self) -> None:
        self._fonts: dict[int, pygame.font.Font] = {}
        self._last_now: float | None = None

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(
        self,
        surface: pygame.Surface,
        text: str,
        size: int,
        color: tuple[int, int, int],
        x: float,
        baseline: float,
        centered: bool = False,
    ) -> None:
        font = self._font(size)
        image = font.render(text, False, color)
        left = (surface.get_width() - image.get_width()) / 2 if centered else x
        surface.blit(image, (round(left), round(baseline - font.get_ascent())))

    def draw_menu(self, surface: pygame.Surface, menu: Menu) -> None:
        """Draw the title menu with the cursor next to the selected item."""
        surface.fill(BLACK)
        cursor_x, cursor_y = menu.cursor_position
        pygame.draw.rect(surface, CURSOR_COLOR, (cursor_x, cursor_y, CURSOR_SIZE, CURSOR_SIZE))
        self._text(surface, TITLE, TITLE_FONT_SIZE, TITLE_COLOR, MENU_X, TITLE_Y, centered=True)
        for offset, label in enumerate(MENU_ITEMS):
            self._text(
                surface,
                label,
                MENU_FONT_SIZE,
                MENU_TEXT_COLOR,
                MENU_TEXT_X,
                MENU_TEXT_Y + offset * MENU_SPACING,
            )

    def _disc(
        self,
        surface: pygame.Surface,
        camera: Camera,
        center: Vec3,
        radius: float,
        color: tuple[int, int, int],
    ) -> None:
        middle = camera.world_to_screen(Vec3(center.x, 0.0, center.z))
        edge = camera.world_to_screen(Vec3(center.x + radius, 0.0, center.z))
        if middle is None or edge is None:
            return
        pixels = max(1, round(math.hypot(edge.x - middle.x, edge.y - middle.y)))
        pygame.draw.circle(surface, color, _to_pixel(middle), pixels)

    def _draw_map_piece(self, surface: pygame.Surface, camera: Camera, model: str) -> None:
        if model == PORTAL_MODEL:
            polygon = _floor_polygon(camera, (GOAL_MIN_X, GOAL_MIN_Z, GOAL_MAX_X, GOAL_MAX_Z))
            if polygon is not None:
                pygame.draw.polygon(surface, PORTAL_COLOR, polygon)
            return
        polygon = _floor_polygon(camera, MapPiece(model).footprint())
        if polygon is None:
            return
        if model == WALL_MODEL:
            pygame.draw.polygon(surface, WALL_COLOR, polygon, WALL_THICKNESS)
        elif model == MAP_MODEL:
            pygame.draw.polygon(surface, ARENA_COLOR, polygon)

    def _draw_arrow(self, surface: pygame.Surface, camera: Camera, position: Vec3) -> None:
        corners = (
            Vec3(position.x, 0.0, position.z - ARROW_TIP),
            Vec3(position.x + ARROW_HALF_WIDTH, 0.0, position.z + ARROW_BASE),
            Vec3(position.x - ARROW_HALF_WIDTH, 0.0, position.z + ARROW_BASE),
        )
        points = [_project(camera, corner) for corner in corners]
        if all(p is not None for p in points):
            pygame.draw.polygon(surface, ARROW_COLOR, points)

    @staticmethod
    def _draw_bar(surface: pygame.Surface, bar: HealthBar) -> None:
        x, y = int(bar.x), int(bar.y)
        height = max(1, round(bar.height))
        pygame.draw.rect(surface, bar.background, (x, y, round(bar.width), height))
        filled = round(bar.width * bar.fill)
        if filled > 0:
            pygame.draw.rect(surface, bar.color, (x, y, filled, height))

    def draw_game(self, surface: pygame.Surface, tutorial: Tutorial, now: float) -> None:
        """Draw one frame of the tutorial as seen at time ``now``."""
        fps = 0.0
        if self._last_now is not None and now > self._last_now:
            fps = 1.0 / (now - self._last_now)
        self._last_now = now

        if tutorial.black_frame:
            surface.fill(BLACK)
            return

        camera = tutorial.camera
        surface.fill(FLOOR_COLOR)
        for model in tutorial.map_models:
            self._draw_map_piece(surface, camera, model)

        arrow = tutorial.arrow_index(now)
        if arrow is not None:
            self._draw_arrow(surface, camera, ARROW_POSITIONS[arrow])

        for banner in tutorial.banners(now):
            radius = BANNER_RADIUS * banner.scale[0] / SPAWN_BANNER_SCALE
            self._disc(surface, camera, banner.position, radius, _BANNER_COLORS[banner.banner_type])

        self._disc(surface, camera, tutorial.bullet.position, BULLET_RADIUS, BULLET_COLOR)
        self._disc(surface, camera, tutorial.player.position, PLAYER_RADIUS, PLAYER_COLOR)
        for zombie in tutorial.zombies:
            if zombie.alive:
                self._disc(surface, camera, zombie.position, ZOMBIE_RADIUS, ZOMBIE_COLOR)

        for zombie in tutorial.zombies:
            bar = zombie.health_bar(camera)
            if bar is not None:
                self._draw_bar(surface, bar)

        y = DEBUG_Y
        self._text(surface, f"FPS: {fps:.2f}", DEBUG_FONT_SIZE, DEBUG_TEXT_COLOR, DEBUG_X, y)
        if tutorial.zombies:
            first = tutorial.zombies[0].position
            player = tutorial.player.position
            distance = math.hypot(player.x - first.x, player.z - first.z)
            y += DEBUG_LINE
            self._text(
                surface,
                f"Zombie Player Distance: {distance:.4f}",
                DEBUG_FONT_SIZE,
                DEBUG_TEXT_COLOR,
                DEBUG_X,
                y,
            )