"""The game's screens and the frame loop that ties the pieces together."""

from __future__ import annotations

import random
from collections.abc import Set
from enum import Enum, auto

from .barricades import Barricades
from .invaders import InvaderFleet
from .player import Key, Player
from .ufo import Ufo

DEFEAT_LINE = 11


class GameState(Enum):
    """Which screen the game is on."""

    MENU = auto()
    PLAY = auto()
    PAUSE = auto()
    DEFEAT = auto()
    EXIT = auto()


class Game:
    """Holds everything on screen, the score and the current screen."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.MENU
        self.started = False
        self.running = True
        self.score = 0
        self.barricades = Barricades()
        self.fleet = InvaderFleet(self.barricades, self.rng)
        self.ufo = Ufo(self.rng)
        self.player = Player()

    def update(self, keys: Set[Key]) -> bool:
        """Run one frame; return False once the game has been closed."""
        state = self.state
        if state is GameState.MENU:
            if Key.ENTER in keys:
                self.state = GameState.PLAY
            if Key.ESCAPE in keys:
                self.state = GameState.EXIT
        elif state is GameState.PLAY:
            if not self.started:
                self.reset()
                self.started = True
            self.play_frame(keys)
            if Key.ESCAPE in keys:
                self.state = GameState.PAUSE
        elif state is GameState.PAUSE:
            if Key.ENTER in keys:
                self.state = GameState.PLAY
            if Key.ESCAPE in keys:
                self.state = GameState.EXIT
        elif state is GameState.DEFEAT:
            if Key.ENTER in keys:
                self.player.restore_lives()
                self.score = 0
                self.started = False
                self.state = GameState.MENU
            if Key.ESCAPE in keys:
                self.state = GameState.EXIT
        else:
            self.running = False
        return self.running

    def reset(self) -> None:
        """Rebuild the playfield, keeping score and lives."""
        self.player.reset()
        self.barricades.reset()
        self.ufo.reset()
        self.fleet.reset()

    def play_frame(self, keys: Set[Key]) -> None:
        """Advance the player, the UFO and the invaders by one frame."""
        self.add_score(self.player.update(keys, self.fleet, self.ufo, self.barricades))
        self.ufo.spawn()
        if self.fleet.update(self.player):
            self.reset()
        if self.fleet.is_cleared():
            self.reset()
        if self.player.lives <= 0 or self.fleet.line_count >= DEFEAT_LINE:
            self.state = GameState.DEFEAT

    def add_score(self, points: int) -> None:
        """Add ``points`` to the score."""
        self.score += points

    def score_text(self) -> str:
        """The score as shown on screen."""
        return f"SCORE : {self.score}"