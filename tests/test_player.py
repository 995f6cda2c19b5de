import pytest

from invaders_arcade.barricades import Barricades
from invaders_arcade.invaders import Invader, InvaderFleet
from invaders_arcade.player import Key, Laser, Player
from invaders_arcade.ufo import Ufo, ufo_points


@pytest.fixture
def world():
    barricades = Barricades()
    fleet = InvaderFleet(barricades)
    fleet.invaders = []
    return fleet, Ufo(), barricades


def test_laser_starts_dead():
    assert Laser().alive is False


def test_laser_shoot_places_shot_above_origin():
    laser = Laser()
    assert laser.shoot(100.0, 50.0) is True
    assert laser.alive is True
    assert laser.x == 100.0
    assert laser.y == 80.0


def test_laser_shoot_ignored_while_alive():
    laser = Laser()
    laser.shoot(100.0, 50.0)
    assert laser.shoot(300.0, 300.0) is False
    assert laser.x == 100.0


def test_laser_advance_moves_up_when_nothing_hit(world):
    laser = Laser()
    laser.shoot(500.0, 100.0)
    before = laser.y
    assert laser.advance(*world, 0) == 0
    assert laser.y == before + 12
    assert laser.alive is True


def test_dead_laser_does_not_move(world):
    laser = Laser()
    laser.y = 10.0
    assert laser.advance(*world, 0) == 0
    assert laser.y == 10.0


def test_laser_off_screen_dies(world):
    laser = Laser()
    laser.shoot(500.0, 100.0)
    laser.y = 768.0
    assert laser.advance(*world, 0) == 0
    assert laser.alive is False


def test_laser_hits_invader_and_scores(world):
    fleet, ufo, barricades = world
    laser = Laser()
    laser.shoot(500.0, 100.0)
    fleet.invaders = [Invader(500.0, laser.y + 12, 40)]
    assert laser.advance(fleet, ufo, barricades, 0) == 40
    assert laser.alive is False
    assert fleet.invaders == []


def test_laser_hits_ufo(world):
    fleet, ufo, barricades = world
    ufo.x = 500.0
    laser = Laser()
    laser.alive = True
    laser.x, laser.y = 500.0, 690.0
    assert laser.advance(fleet, ufo, barricades, 23) == ufo_points(23)
    assert laser.alive is False


def test_laser_hits_barricade_without_scoring(world):
    fleet, ufo, barricades = world
    laser = Laser()
    laser.shoot(200.0, 100.0)
    barricades.add_brick(200.0, laser.y + 12, 0)
    assert laser.advance(fleet, ufo, barricades, 0) == 0
    assert laser.alive is False
    assert barricades.bricks[0].health == 1


def test_player_moves_left_and_right():
    player = Player()
    start = player.x
    player.move({Key.LEFT})
    assert player.x == start - 5
    player.move({Key.RIGHT})
    player.move({Key.RIGHT})
    assert player.x == start + 5


def test_player_fires_once_while_laser_in_flight():
    player = Player()
    player.move({Key.FIRE})
    player.move({Key.FIRE})
    assert player.shot_count == 1
    assert player.laser.alive is True


def test_player_update_moves_laser(world):
    player = Player()
    player.update({Key.FIRE}, *world)
    assert player.laser.y > player.y
    assert player.shot_count == 1


def test_detect_hit_costs_a_life():
    player = Player()
    assert player.detect_hit(player.x, player.y) is True
    assert player.lives == 2
    assert player.alive is True


def test_detect_hit_misses():
    player = Player()
    assert player.detect_hit(player.x + 16, player.y) is False
    assert player.lives == 3


def test_losing_last_life_kills_player():
    player = Player()
    for _ in range(3):
        player.detect_hit(player.x, player.y)
    assert player.lives == 0
    assert player.alive is False


def test_reset_keeps_lives_and_restore_refills():
    player = Player()
    player.detect_hit(player.x, player.y)
    player.x += 40
    player.reset()
    assert player.lives == 2
    assert player.x == 512
    player.restore_lives()
    assert player.lives == 3