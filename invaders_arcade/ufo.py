"""The mystery ship that crosses the top of the screen."""

from __future__ import annotations

import random

UFO_START_X = 1088.0
UFO_Y = 700.0
UFO_SPEED = 5.0
UFO_EXIT_X = -64.0
UFO_HALF_WIDTH = 64.0
UFO_HALF_HEIGHT = 32.0
SPAWN_FRAMES = 5
SPAWN_CHANCE = 300
SPAWN_TRIGGER = 55
BONUS_SHOT = 23
BONUS_PERIOD = 15
BONUS_POINTS = 300
REGULAR_POINTS = 200


def ufo_points(shot_count: int) -> int:
    """Points for hitting the UFO: 300 on shot 23 and every 15th shot from it, else 200."""
    if shot_count == BONUS_SHOT or (shot_count - BONUS_SHOT) % BONUS_PERIOD == 0:
        return BONUS_POINTS
    return REGULAR_POINTS


class Ufo:
    """A single UFO that occasionally appears and flies right to left."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.x = UFO_START_X
        self.y = UFO_Y
        self.on_screen = False
        self.frame_count = 0

    def reset(self) -> None:
        """Take the UFO off screen and back to its start position."""
        self.on_screen = False
        self.x = UFO_START_X

    def spawn(self) -> bool:
        """Advance one frame, maybe spawning the UFO; return whether it is on screen."""
        if not self.on_screen:
            self.frame_count += 1
            if self.frame_count > SPAWN_FRAMES:
                if self.rng.randrange(SPAWN_CHANCE) == SPAWN_TRIGGER:
                    self.on_screen = True
                self.frame_count = 0
        if self.on_screen:
            self.move()
        return self.on_screen

    def move(self) -> None:
        """Fly left; once past the edge, leave the screen."""
        self.x -= UFO_SPEED
        if self.x <= UFO_EXIT_X:
            self.reset()

    def hit_detection(self, x: float, y: float, shot_count: int) -> int:
        """Return the points scored if a laser at ``(x, y)`` hits the UFO, else 0."""
        if self.y - UFO_HALF_HEIGHT < y < self.y + UFO_HALF_HEIGHT:
            if self.x - UFO_HALF_WIDTH < x < self.x + UFO_HALF_WIDTH:
                self.reset()
                return ufo_points(shot_count)
        return 0