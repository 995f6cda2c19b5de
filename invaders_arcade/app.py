"""Window, input and drawing for playing the game with pygame."""

from __future__ import annotations

import argparse
import os
import random
from collections import defaultdict
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .barricades import BRICK_HEALTH  # noqa: E402
from .game import Game, GameState  # noqa: E402
from .player import Key  # noqa: E402

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
SPRITE = 32
TITLE = "Space Invaders"

KEY_BINDINGS = {
    pygame.K_a: Key.LEFT,
    pygame.K_d: Key.RIGHT,
    pygame.K_SPACE: Key.FIRE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
}
_EDGE_KEYS = frozenset({Key.ENTER, Key.ESCAPE})

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_GREEN = (0, 230, 0)
_RED = (230, 40, 40)
_INVADER_COLOURS = {40: (220, 80, 220), 20: (80, 200, 255), 10: (255, 220, 80)}


def keys_from_pressed(pressed) -> frozenset[Key]:
    """Map a pygame key-state lookup (indexed by key code) to game keys."""
    return frozenset(key for code, key in KEY_BINDINGS.items() if pressed[code])


def to_screen(x: float, y: float) -> tuple[float, float]:
    """Convert game coordinates (origin bottom left) to window coordinates."""
    return x, SCREEN_HEIGHT - y


def _rect(x: float, y: float, width: float, height: float) -> pygame.Rect:
    rect = pygame.Rect(0, 0, int(width), int(height))
    rect.center = tuple(round(v) for v in to_screen(x, y))
    return rect


def _centred_text(screen, font, lines: Sequence[str]) -> None:
    top = SCREEN_HEIGHT // 2 - len(lines) * font.get_linesize() // 2
    for offset, line in enumerate(lines):
        image = font.render(line, True, _WHITE)
        rect = image.get_rect(centerx=SCREEN_WIDTH // 2, top=top + offset * font.get_linesize())
        screen.blit(image, rect)


def _draw_play(screen, font, game: Game) -> None:
    player = game.player
    for life in range(player.lives):
        pygame.draw.rect(screen, _GREEN, _rect(700 + 24 * life, 50, 16, 16))
    pygame.draw.rect(screen, _GREEN, _rect(player.x, player.y, SPRITE, SPRITE))
    if player.laser.alive:
        pygame.draw.rect(screen, _WHITE, _rect(player.laser.x, player.laser.y, 4, 16))
    if game.ufo.on_screen:
        pygame.draw.rect(screen, _RED, _rect(game.ufo.x, game.ufo.y, 64, 32))
    for brick in game.barricades.bricks:
        shade = 120 + 120 * brick.health // BRICK_HEALTH
        pygame.draw.rect(screen, (0, shade, 0), _rect(brick.x, brick.y, SPRITE, SPRITE))
    for shot in game.fleet.shots:
        pygame.draw.rect(screen, _WHITE, _rect(shot.x, shot.y - SPRITE / 2, 4, 16))
    for invader in game.fleet.invaders:
        colour = _INVADER_COLOURS.get(invader.points, _WHITE)
        pygame.draw.rect(screen, colour, _rect(invader.x, invader.y, SPRITE, SPRITE))
    score = font.render(game.score_text(), True, _WHITE)
    screen.blit(score, score.get_rect(bottomleft=to_screen(50, 50)))


def _draw(screen, font, game: Game) -> None:
    screen.fill(_BLACK)
    if game.state is GameState.MENU:
        _centred_text(screen, font, [TITLE.upper(), "ENTER TO PLAY", "ESCAPE TO QUIT"])
    elif game.state is GameState.PLAY:
        _draw_play(screen, font, game)
    elif game.state is GameState.PAUSE:
        _centred_text(screen, font, ["PAUSED", "ENTER TO RESUME", "ESCAPE TO QUIT"])
    elif game.state is GameState.DEFEAT:
        _centred_text(
            screen,
            font,
            ["DEFEAT", f"YOU SCORED : {game.score}", "ENTER TO PLAY AGAIN", "ESCAPE TO QUIT"],
        )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Space Invaders.")
    parser.add_argument("--fps", type=int, default=20, help="frames per second")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, 30)
        clock = pygame.time.Clock()
        game = Game(random.Random(args.seed))
        running = True
        while running:
            pressed_now: defaultdict[int, bool] = defaultdict(bool)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    pressed_now[event.key] = True
            # Menu keys act on the press itself so holding one does not skip screens.
            held = keys_from_pressed(pygame.key.get_pressed()) - _EDGE_KEYS
            keys = held | (keys_from_pressed(pressed_now) & _EDGE_KEYS)
            running = game.update(keys)
            _draw(screen, font, game)
            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0