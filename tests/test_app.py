from collections import defaultdict

import pygame
import pytest

from invaders_arcade.app import keys_from_pressed, main, to_screen
from invaders_arcade.player import Key


def pressed(*codes):
    state = defaultdict(bool)
    for code in codes:
        state[code] = True
    return state


def test_no_keys_pressed():
    assert keys_from_pressed(pressed()) == frozenset()


@pytest.mark.parametrize(
    ("code", "key"),
    [
        (pygame.K_a, Key.LEFT),
        (pygame.K_d, Key.RIGHT),
        (pygame.K_SPACE, Key.FIRE),
        (pygame.K_RETURN, Key.ENTER),
        (pygame.K_ESCAPE, Key.ESCAPE),
    ],
)
def test_single_binding(code, key):
    assert keys_from_pressed(pressed(code)) == {key}


def test_unbound_keys_ignored():
    assert keys_from_pressed(pressed(pygame.K_q, pygame.K_a)) == {Key.LEFT}


def test_to_screen_flips_vertical_axis():
    assert to_screen(0, 0) == (0, 768)
    assert to_screen(100, 768) == (100, 0)


def test_to_screen_keeps_centre():
    assert to_screen(512, 384) == (512, 384)


def test_to_screen_is_its_own_inverse():
    x, y = to_screen(*to_screen(37.5, 210.0))
    assert (x, y) == (37.5, 210.0)


def test_main_rejects_bad_fps():
    with pytest.raises(SystemExit) as excinfo:
        main(["--fps", "fast"])
    assert excinfo.value.code == 2