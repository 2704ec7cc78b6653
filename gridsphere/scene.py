"""An interactive scene: a ground grid and two spheres seen through a movable camera."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from gridsphere.geometry import ScreenLine, Sphere, grid_lines, is_collision, sphere_lines
from gridsphere.linalg import (
    Matrix4x4,
    Vector3,
    make_affine_matrix,
    make_perspective_fov_matrix,
    make_viewport_matrix,
)

WINDOW_SIZE = (1280, 720)
VIEW_WIDTH = 720
VIEW_HEIGHT = 1280
CAMERA_STEP = 0.1
WHITE = 0xFFFFFFFF
RED = 0xFF0000FF
SECOND_SPHERE_COLOR = 0xAAAAAAFF
BACKGROUND = 0x000000FF


class Key(Enum):
    """Keys that move the camera."""

    FORWARD = "w"
    BACK = "s"
    LEFT = "a"
    RIGHT = "d"


_MOVES = {
    Key.FORWARD: Vector3(0.0, 0.0, CAMERA_STEP),
    Key.BACK: Vector3(0.0, 0.0, -CAMERA_STEP),
    Key.LEFT: Vector3(-CAMERA_STEP, 0.0, 0.0),
    Key.RIGHT: Vector3(CAMERA_STEP, 0.0, 0.0),
}

_UNIT = Vector3(1.0, 1.0, 1.0)


@dataclass
class Scene:
    """Camera, world transform and the two spheres of the scene."""

    rotate: Vector3 = field(default_factory=Vector3)
    translate: Vector3 = field(default_factory=Vector3)
    camera_translate: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.9, -6.49))
    camera_rotate: Vector3 = field(default_factory=lambda: Vector3(0.26, 0.0, 0.0))
    sphere_a: Sphere = field(default_factory=lambda: Sphere(Vector3(), 1.0))
    sphere_b: Sphere = field(default_factory=lambda: Sphere(Vector3(5.0, 0.0, 5.0), 0.5))
    sphere_color: int = WHITE

    def update(self, pressed: Iterable[Key | str]) -> None:
        """Advance one frame: move the camera for held keys and recolour on collision."""
        for key in (Key(k) for k in pressed):
            self.camera_translate = self.camera_translate + _MOVES[key]
        self.sphere_color = RED if is_collision(self.sphere_a, self.sphere_b) else WHITE

    def view_projection(self) -> Matrix4x4:
        """Return the combined world-view-projection matrix."""
        world = make_affine_matrix(_UNIT, self.rotate, self.translate)
        camera = make_affine_matrix(_UNIT, self.camera_rotate, self.camera_translate)
        projection = make_perspective_fov_matrix(0.45, VIEW_WIDTH / VIEW_HEIGHT, 0.1, 100.0)
        return world @ (camera.inverse() @ projection)

    def viewport(self) -> Matrix4x4:
        """Return the viewport matrix."""
        return make_viewport_matrix(0.0, 0.0, float(VIEW_WIDTH), float(VIEW_HEIGHT), 0.0, 1.0)

    def lines(self) -> Iterator[ScreenLine]:
        """Yield every screen line of the frame: grid, first sphere, second sphere."""
        view_projection = self.view_projection()
        viewport = self.viewport()
        yield from grid_lines(view_projection, viewport)
        yield from sphere_lines(self.sphere_a, view_projection, viewport, self.sphere_color)
        yield from sphere_lines(self.sphere_b, view_projection, viewport, SECOND_SPHERE_COLOR)


def _rgba(color: int) -> tuple[int, int, int, int]:
    return ((color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def main(argv: list[str] | None = None) -> int:
    """Open a window and run the scene until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="gridsphere", description=__doc__)
    parser.parse_args(argv)

    import pygame

    key_codes = {
        Key.FORWARD: pygame.K_w,
        Key.BACK: pygame.K_s,
        Key.LEFT: pygame.K_a,
        Key.RIGHT: pygame.K_d,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("gridsphere")
        clock = pygame.time.Clock()
        scene = Scene()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            held = pygame.key.get_pressed()
            scene.update(key for key, code in key_codes.items() if held[code])
            screen.fill(_rgba(BACKGROUND))
            for line in scene.lines():
                pygame.draw.line(screen, _rgba(line.color), line.start, line.end)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())