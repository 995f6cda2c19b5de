"""The player's fighter, its lives and its single laser."""

from __future__ import annotations

from collections.abc import Set
from enum import Enum, auto

from .barricades import Barricades
from .invaders import InvaderFleet
from .ufo import Ufo

SCREEN_HEIGHT = 768.0
START_X = 1024 / 2
START_Y = 768 / 8
MOVE_STEP = 5.0
HIT_HALF_SIZE = 16.0
STARTING_LIVES = 3
LASER_OFFSET = 30.0
LASER_SPEED = 12.0


class Key(Enum):
    """Inputs the game reacts to."""

    LEFT = auto()
    RIGHT = auto()
    FIRE = auto()
    ENTER = auto()
    ESCAPE = auto()


class Laser:
    """The player's laser; only one may be in flight at a time."""

    def __init__(self) -> None:
        self.alive = False
        self.x = 0.0
        self.y = 0.0

    def shoot(self, x: float, y: float) -> bool:
        """Fire from just above ``(x, y)`` unless a shot is already in flight."""
        if self.alive:
            return False
        self.x = x
        self.y = y + LASER_OFFSET
        self.alive = True
        return True

    def advance(
        self,
        fleet: InvaderFleet,
        ufo: Ufo,
        barricades: Barricades,
        shot_count: int,
    ) -> int:
        """Move the laser up one step and return the points it scored."""
        if not self.alive:
            return 0
        if self.y >= SCREEN_HEIGHT:
            self.alive = False
            return 0
        self.y += LASER_SPEED
        points = fleet.detect_hit(self.x, self.y)
        if not points:
            points = ufo.hit_detection(self.x, self.y, shot_count)
        if points or barricades.detect_hit(self.x, self.y):
            self.alive = False
        return points


class Player:
    """The fighter at the bottom of the screen."""

    def __init__(self) -> None:
        self.lives = STARTING_LIVES
        self.shot_count = 0
        self.laser = Laser()
        self.x = START_X
        self.y = START_Y
        self.alive = True
        self.reset()

    def reset(self) -> None:
        """Put the fighter back at its start and cancel any laser; lives are kept."""
        self.alive = True
        self.x = START_X
        self.y = START_Y
        self.laser.alive = False

    def restore_lives(self) -> None:
        """Give back the full set of lives."""
        self.lives = STARTING_LIVES

    def move(self, keys: Set[Key]) -> None:
        """Steer left or right and fire when asked."""
        if Key.LEFT in keys:
            self.x -= MOVE_STEP
        if Key.RIGHT in keys:
            self.x += MOVE_STEP
        if Key.FIRE in keys and self.laser.shoot(self.x, self.y):
            self.shot_count += 1

    def update(
        self,
        keys: Set[Key],
        fleet: InvaderFleet,
        ufo: Ufo,
        barricades: Barricades,
    ) -> int:
        """Run one frame of input and laser flight; return the points scored."""
        self.move(keys)
        return self.laser.advance(fleet, ufo, barricades, self.shot_count)

    def detect_hit(self, x: float, y: float) -> bool:
        """Lose a life if an invader shot at ``(x, y)`` hits the fighter."""
        if (
            self.x - HIT_HALF_SIZE < x < self.x + HIT_HALF_SIZE
            and self.y - HIT_HALF_SIZE < y < self.y + HIT_HALF_SIZE
        ):
            self.lives -= 1
            if self.lives <= 0:
                self.alive = False
            return True
        return False