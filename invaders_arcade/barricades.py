"""Destructible barricades that shelter the player from invader fire."""

from __future__ import annotations

from dataclasses import dataclass, field

SPRITE_SIZE = 32.0
BRICK_HEALTH = 2
BARRICADE_COUNT = 4
FIRST_BRICK_X = 64.0
FIRST_BRICK_Y = 200.0
BARRICADE_GAP = 142.0


@dataclass
class Brick:
    """One portion of a barricade; it survives a single hit."""

    x: float
    y: float
    health: int = BRICK_HEALTH


@dataclass
class Barricades:
    """The four barricades, kept as a flat list of bricks."""

    sprite_size: float = SPRITE_SIZE
    bricks: list[Brick] = field(default_factory=list)

    def reset(self) -> None:
        """Rebuild all four barricades in their starting shape."""
        self.bricks.clear()
        x, y = FIRST_BRICK_X, FIRST_BRICK_Y
        size = self.sprite_size
        for _ in range(BARRICADE_COUNT):
            # Columns of 3, 2, 2, 3 bricks; the middle columns start one brick higher.
            for index in range(3):
                self.add_brick(x, y, index)
            x += size
            y += size
            for _ in range(2):
                for index in range(2):
                    self.add_brick(x, y, index)
                x += size
            y -= size
            for index in range(3):
                self.add_brick(x, y, index)
            x += BARRICADE_GAP

    def add_brick(self, x: float, y: float, index: int) -> Brick:
        """Add a brick ``index`` sprites above ``(x, y)`` and return it."""
        brick = Brick(x, y + self.sprite_size * index)
        self.bricks.append(brick)
        return brick

    def detect_hit(self, x: float, y: float) -> bool:
        """Damage the first brick covering ``(x, y)``; report whether one was hit."""
        half = self.sprite_size * 0.5
        for brick in self.bricks:
            if brick.x - half < x < brick.x + half and brick.y - half < y < brick.y + half:
                brick.health -= 1
                if brick.health == 0:
                    self.bricks.remove(brick)
                return True
        return False