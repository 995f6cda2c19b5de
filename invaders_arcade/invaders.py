"""The invader fleet: formation, marching, shooting and being shot."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol

from .barricades import Barricades

SCREEN_WIDTH = 1024.0
SPRITE_SIZE = 32.0
COLUMNS = 11
MAX_INVADERS = 55
ROW_POINTS = (40, 20, 20, 10, 10)
FIRST_X = SCREEN_WIDTH / ((SPRITE_SIZE + 1) * COLUMNS) + SPRITE_SIZE * 0.75
COLUMN_SPACING = SPRITE_SIZE + 11
TOP_Y = 675 - SPRITE_SIZE * 0.9
SPEED_UP_EVERY = 15
FRAMES_PER_STEP = 5
DEFEAT_LINE = 11
MAX_SHOTS = 3
SHOT_CHANCE = 150
SHOT_TRIGGER = 24
SHOT_SPEED = 6.0
SHOT_FLOOR = 768 / 8 - 16


class Target(Protocol):
    def detect_hit(self, x: float, y: float) -> bool: ...


@dataclass
class Invader:
    """One invader and the points it is worth."""

    x: float
    y: float
    points: int


@dataclass
class Shot:
    """A laser dropped by an invader."""

    x: float
    y: float
    alive: bool = True


class InvaderFleet:
    """All invaders and their shots."""

    def __init__(self, barricades: Barricades, rng: random.Random | None = None) -> None:
        self.barricades = barricades
        self.rng = rng if rng is not None else random.Random()
        self.invaders: list[Invader] = []
        self.shots: list[Shot] = []
        self.frame_count = 0
        self.line_count = 0
        self.direction = 1
        self.speed = 1.0
        self.defeated = False
        self.reset()

    def reset(self) -> None:
        """Put a full formation back at the top, with no shots in flight."""
        self.line_count = 0
        self.direction = 1
        self.shots = []
        self.invaders = [
            Invader(FIRST_X + COLUMN_SPACING * column, TOP_Y - SPRITE_SIZE * row, points)
            for row, points in enumerate(ROW_POINTS)
            for column in range(COLUMNS)
        ]

    def update(self, target: Target | None = None) -> bool:
        """Run one frame; return True if a shot hit ``target``."""
        self.frame_count += 1
        if self.frame_count > FRAMES_PER_STEP:
            self.frame_count = 0
            self.move()
            if self.line_count > DEFEAT_LINE:
                self.defeated = True
        if len(self.shots) < MAX_SHOTS:
            self.shoot()
        for shot in list(self.shots):
            if shot.alive and self.move_shot(shot, target):
                return True
        return False

    def _step(self) -> float:
        return SPRITE_SIZE / 6 * self.direction * self.speed

    def move(self) -> None:
        """March one step; at a screen edge drop a line and turn around."""
        self.speed = 1.0 + (MAX_INVADERS - len(self.invaders)) // SPEED_UP_EVERY
        for invader in self.invaders:
            if invader.x > SCREEN_WIDTH or invader.x < 0:
                self.direction = -self.direction
                self.line_count += 1
                step = self._step()
                for other in self.invaders:
                    other.x += step
                    other.y -= SPRITE_SIZE
                return
            invader.x += self._step()

    def detect_hit(self, x: float, y: float) -> int:
        """Destroy the invader at ``(x, y)`` and return its points, or 0 on a miss."""
        half = SPRITE_SIZE * 0.5
        for invader in self.invaders:
            if invader.x - half < x < invader.x + half and invader.y - half < y < invader.y + half:
                self.invaders.remove(invader)
                return invader.points
        return 0

    def shoot(self) -> None:
        """Give every invader a chance to fire, up to the shot limit."""
        for invader in self.invaders:
            if len(self.shots) >= MAX_SHOTS:
                return
            if self.rng.randrange(SHOT_CHANCE) == SHOT_TRIGGER:
                self.shots.append(Shot(invader.x, invader.y))

    def _remove_shot(self, shot: Shot) -> None:
        shot.alive = False
        if shot in self.shots:
            self.shots.remove(shot)

    def move_shot(self, shot: Shot, target: Target | None) -> bool:
        """Move a shot down; return True if it hit ``target``."""
        if self.barricades.detect_hit(shot.x, shot.y):
            self._remove_shot(shot)
            return False
        if shot.y > SHOT_FLOOR:
            shot.y -= SHOT_SPEED
            return bool(target is not None and target.detect_hit(shot.x, shot.y))
        self._remove_shot(shot)
        return False

    def is_cleared(self) -> bool:
        """Whether every invader has been destroyed."""
        return not self.invaders