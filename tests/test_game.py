import random

import pytest

from asteroids import config
from asteroids.game import (
    GRACE_SPACING,
    AccelerationState,
    Asteroid,
    Bullet,
    DirectionState,
    Game,
    GameState,
    Player,
)


def make_game():
    """A game in play with one parked asteroid far from the ship."""
    game = Game(rng=random.Random(1234))
    game.state = GameState.PLAY
    game.asteroids.append(Asteroid(x=100.0, y=100.0, radius=10.0, dx=0.0, dy=0.0))
    return game


def test_new_game_defaults():
    game = Game()
    assert (game.width, game.height) == (config.WIDTH, config.HEIGHT)
    assert game.state is GameState.MENU
    assert game.level == 0
    assert game.asteroids == [] and game.bullets == []
    assert (game.player.x, game.player.y) == (config.WIDTH / 2, config.HEIGHT / 2)
    assert game.player.direction == 0
    assert game.player.velocity == 0


def test_first_frame_starts_level_one():
    game = Game(rng=random.Random(3))
    game.update_frame()
    assert game.level == 1
    assert len(game.asteroids) == game.level + config.MIN_ASTEROIDS


def test_asteroid_count_is_capped():
    game = Game(rng=random.Random(5))
    game.level = 4 * config.MAX_ASTEROIDS
    game.update_frame()
    assert len(game.asteroids) == config.MAX_ASTEROIDS


@pytest.mark.parametrize("seed", range(10))
def test_spawned_radii_in_range(seed):
    game = Game(rng=random.Random(seed))
    game.level = config.MAX_ASTEROIDS
    game.update_frame()
    for asteroid in game.asteroids:
        assert config.ASTEROID_RADIUS_MIN <= asteroid.radius <= config.ASTEROID_RADIUS_MAX


def test_spawning_is_deterministic_for_a_seed():
    first = Game(rng=random.Random(7))
    second = Game(rng=random.Random(7))
    first.update_frame()
    second.update_frame()
    assert first.asteroids == second.asteroids


def test_rotation_clockwise_and_counter_clockwise():
    game = make_game()
    game.player.direction_state = DirectionState.CLOCKWISE
    game.update_frame()
    assert game.player.direction == config.ROTATION_SPEED

    game = make_game()
    game.player.direction_state = DirectionState.COUNTER_CLOCKWISE
    game.update_frame()
    assert game.player.direction == 360 - config.ROTATION_SPEED


def test_velocity_clamped_between_limits():
    game = make_game()
    game.player.direction = 90
    game.player.acceleration_state = AccelerationState.ACCELERATING
    for _ in range(100):
        game.update_frame()
    assert game.player.velocity == pytest.approx(config.MAX_SPEED)

    game.player.acceleration_state = AccelerationState.DECELERATING
    for _ in range(100):
        game.update_frame()
    assert game.player.velocity == config.MIN_SPEED


def test_player_moves_along_heading():
    game = make_game()
    game.player.direction = 90
    game.player.velocity = 4.0
    start_x, start_y = game.player.x, game.player.y
    game.update_frame()
    assert game.player.x == pytest.approx(start_x + 4.0)
    assert game.player.y == pytest.approx(start_y)


def test_player_stays_inside_window():
    game = make_game()
    game.player.y = 2.0
    game.player.velocity = 4.0
    game.update_frame()
    assert game.player.y == 2.0


def test_shoot_creates_bullet_along_heading():
    game = make_game()
    assert game.shoot() is True
    bullet = game.bullets[0]
    assert (bullet.x, bullet.y) == (game.player.x, game.player.y)
    assert bullet.dx == pytest.approx(0.0)
    assert bullet.dy == pytest.approx(-config.BULLET_VELOCITY)


def test_shoot_respects_bullet_limit():
    game = make_game()
    results = [game.shoot() for _ in range(config.MAX_BULLETS)]
    assert all(results)
    assert game.shoot() is False
    assert len(game.bullets) == config.MAX_BULLETS


def test_bullets_leaving_window_are_removed():
    game = make_game()
    game.bullets.append(Bullet(x=5.0, y=300.0, dx=-10.0, dy=0.0))
    game.bullets.append(Bullet(x=400.0, y=500.0, dx=1.0, dy=0.0))
    game.update_frame()
    assert game.bullets == [Bullet(x=401.0, y=500.0, dx=1.0, dy=0.0)]


def test_small_asteroid_destroyed_by_bullet():
    game = make_game()
    game.bullets.append(Bullet(x=100.0, y=100.0, dx=0.0, dy=0.0))
    game.update_frame()
    assert game.asteroids == []
    assert game.bullets == []


def test_large_asteroid_splits_in_two():
    game = make_game()
    big = Asteroid(x=600.0, y=400.0, radius=30.0, dx=1.0, dy=0.0)
    game.asteroids.append(big)
    game.bullets.append(Bullet(x=600.0, y=400.0, dx=0.0, dy=0.0))
    game.update_frame()
    assert game.bullets == []
    assert len(game.asteroids) == 3
    fragments = game.asteroids[1:]
    assert all(f.radius < config.ASTEROID_SPLIT_THRESHOLD for f in fragments)
    assert fragments[0].radius == pytest.approx(fragments[1].radius)
    assert sum(f.radius**2 for f in fragments) == pytest.approx(30.0**2)


def test_asteroid_hitting_ship_ends_game():
    game = make_game()
    game.asteroids.append(
        Asteroid(x=game.player.x, y=game.player.y, radius=10.0, dx=0.0, dy=0.0)
    )
    game.update_frame()
    assert game.state is GameState.GAME_OVER
    assert len(game.asteroids) == 2


def test_asteroid_bounces_off_wall():
    game = make_game()
    game.asteroids.append(
        Asteroid(x=game.width - 11.0, y=500.0, radius=10.0, dx=2.0, dy=0.0)
    )
    game.update_frame()
    bounced = game.asteroids[1]
    assert bounced.dx == -2.0
    assert bounced.x == game.width - 10.0 - GRACE_SPACING


def test_equal_asteroids_exchange_velocity():
    game = make_game()
    a1 = Asteroid(x=300.0, y=100.0, radius=20.0, dx=1.0, dy=0.0)
    a2 = Asteroid(x=335.0, y=100.0, radius=20.0, dx=-1.0, dy=0.0)
    game.asteroids.extend([a1, a2])
    game.update_frame()
    assert a1.dx == pytest.approx(-1.0)
    assert a2.dx == pytest.approx(1.0)
    assert a1.dx + a2.dx == pytest.approx(0.0)
    assert a2.x - a1.x >= a1.radius + a2.radius


def test_resize_pulls_objects_inside():
    game = make_game()
    game.asteroids.append(Asteroid(x=190.0, y=140.0, radius=10.0, dx=0.0, dy=0.0))
    game.resize(200, 150)
    assert (game.width, game.height) == (200, 150)
    assert game.player.x == 200 - config.SHIP_RADIUS - GRACE_SPACING
    assert game.player.y == 150 - config.SHIP_RADIUS - GRACE_SPACING
    moved = game.asteroids[1]
    assert (moved.x, moved.y) == (200 - 10.0 - GRACE_SPACING, 150 - 10.0 - GRACE_SPACING)
    assert (game.asteroids[0].x, game.asteroids[0].y) == (100.0, 100.0)


def test_reset_clears_field():
    game = make_game()
    game.shoot()
    game.level = 3
    game.player.direction = 90
    game.player.velocity = 2.0
    game.resize(500, 400)
    game.reset()
    assert game.level == 0
    assert game.asteroids == [] and game.bullets == []
    assert (game.player.x, game.player.y) == (250.0, 200.0)
    assert game.player.direction == 0
    assert game.player.velocity == 0
    assert game.state is GameState.PLAY


def test_player_reset():
    player = Player(
        x=1.0,
        y=2.0,
        direction=45,
        direction_state=DirectionState.CLOCKWISE,
        velocity=3.0,
        acceleration_state=AccelerationState.ACCELERATING,
    )
    player.reset(10.0, 20.0)
    assert player == Player(x=10.0, y=20.0)