"""Game state and the per-frame simulation of ship, bullets and asteroids."""

from __future__ import annotations

import itertools
import math
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto

from asteroids import config

GRACE_SPACING = 5
"""Distance kept from a wall when something is pushed back inside the window."""

_SQRT2 = math.sqrt(2)


class DirectionState(Enum):
    """How the ship is turning."""

    STILL = auto()
    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class AccelerationState(Enum):
    """How the ship's speed is changing."""

    CONSTANT = auto()
    DECELERATING = auto()
    ACCELERATING = auto()


class GameState(Enum):
    """Screens the game can be on."""

    MENU = auto()
    PLAY = auto()
    PAUSE = auto()
    GAME_OVER = auto()


class _Side(IntEnum):
    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


def _heading(direction: float) -> tuple[float, float]:
    """Unit vector for a direction in degrees, 0 pointing up, clockwise positive."""
    rad = math.radians(direction)
    return math.sin(rad), -math.cos(rad)


def _touching(ax: float, ay: float, bx: float, by: float, reach: float) -> bool:
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy <= reach * reach


def _pull_inside(pos: float, radius: float, limit: float) -> tuple[float, bool]:
    """Move a coordinate back inside [radius, limit - radius].

    Returns the new coordinate and whether the velocity along that axis flips.
    """
    flipped = False
    if pos >= limit - radius:
        pos = limit - radius - GRACE_SPACING
        flipped = not flipped
    if pos <= radius:
        pos = radius + GRACE_SPACING
        flipped = not flipped
    return pos, flipped


@dataclass
class Player:
    """The ship controlled by the player."""

    x: float
    y: float
    direction: int = 0
    direction_state: DirectionState = DirectionState.STILL
    velocity: float = 0.0
    acceleration_state: AccelerationState = AccelerationState.CONSTANT

    def reset(self, x: float, y: float) -> None:
        """Place the ship at (x, y), pointing up and standing still."""
        self.x = x
        self.y = y
        self.direction = 0
        self.direction_state = DirectionState.STILL
        self.velocity = 0.0
        self.acceleration_state = AccelerationState.CONSTANT


@dataclass
class Asteroid:
    """A round asteroid drifting across the window."""

    x: float
    y: float
    radius: float
    dx: float
    dy: float


@dataclass
class Bullet:
    """A bullet travelling in a straight line."""

    x: float
    y: float
    dx: float
    dy: float


def _split(asteroid: Asteroid) -> tuple[Asteroid, Asteroid]:
    """The two fragments a shot asteroid breaks into, sideways to its motion."""
    speed = math.hypot(asteroid.dx, asteroid.dy)
    if speed == 0:
        nx, ny = 0.0, -1.0
    else:
        nx, ny = asteroid.dx / speed, asteroid.dy / speed
    radius = asteroid.radius / _SQRT2
    near = Asteroid(
        x=asteroid.x - ny * asteroid.radius,
        y=asteroid.y + nx * asteroid.radius,
        radius=radius,
        dx=asteroid.dx - ny,
        dy=asteroid.dy + nx,
    )
    far = Asteroid(
        x=asteroid.x + ny * radius,
        y=asteroid.y - nx * radius,
        radius=radius,
        dx=asteroid.dx + ny,
        dy=asteroid.dy - nx,
    )
    return near, far


def _bounce(a1: Asteroid, a2: Asteroid) -> None:
    """Separate two overlapping asteroids and exchange momentum elastically."""
    dx = a2.x - a1.x
    dy = a2.y - a1.y
    dist_sq = dx * dx + dy * dy
    radius_sum = a1.radius + a2.radius
    if dist_sq >= radius_sum * radius_sum:
        return
    dist = math.sqrt(dist_sq)
    if dist == 0.0:
        return
    nx = dx / dist
    ny = dy / dist

    overlap = 0.6 * (radius_sum - dist + 1.0)
    a1.x -= nx * overlap
    a1.y -= ny * overlap
    a2.x += nx * overlap
    a2.y += ny * overlap

    impact_speed = (a2.dx - a1.dx) * nx + (a2.dy - a1.dy) * ny
    if impact_speed > 0:
        return

    mass1 = a1.radius * a1.radius
    share = mass1 / (mass1 + a2.radius * a2.radius)
    a1.dx += nx * 2 * impact_speed * (1.0 - share)
    a1.dy += ny * 2 * impact_speed * (1.0 - share)
    a2.dx -= nx * 2 * impact_speed * share
    a2.dy -= ny * 2 * impact_speed * share


@dataclass
class Game:
    """Everything needed to simulate one game."""

    width: int = config.WIDTH
    height: int = config.HEIGHT
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    state: GameState = field(default=GameState.MENU, init=False)
    level: int = field(default=0, init=False)
    player: Player = field(init=False)
    asteroids: list[Asteroid] = field(default_factory=list, init=False)
    bullets: list[Bullet] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.player = Player(self.width / 2, self.height / 2)

    def update_frame(self) -> None:
        """Advance the game by one frame, starting a new level when the field is clear."""
        if not self.asteroids:
            self.level += 1
            self._spawn_asteroids()
        self._move_player()
        self._move_bullets()
        self._move_asteroids()
        self._handle_collisions()

    def shoot(self) -> bool:
        """Fire a bullet from the ship; False when the bullet limit is reached."""
        if len(self.bullets) >= config.MAX_BULLETS:
            return False
        hx, hy = _heading(self.player.direction)
        self.bullets.append(
            Bullet(
                x=self.player.x,
                y=self.player.y,
                dx=hx * config.BULLET_VELOCITY,
                dy=hy * config.BULLET_VELOCITY,
            )
        )
        return True

    def resize(self, width: int, height: int) -> None:
        """Change the playing field size and pull everything back inside it."""
        self.width = width
        self.height = height
        player = self.player
        player.x, _ = _pull_inside(player.x, config.SHIP_RADIUS, width)
        player.y, _ = _pull_inside(player.y, config.SHIP_RADIUS, height)
        for asteroid in self.asteroids:
            asteroid.x, _ = _pull_inside(asteroid.x, asteroid.radius, width)
            asteroid.y, _ = _pull_inside(asteroid.y, asteroid.radius, height)

    def reset(self) -> None:
        """Clear the field and return to level zero with the ship centred."""
        self.asteroids.clear()
        self.bullets.clear()
        self.level = 0
        self.player.reset(self.width / 2, self.height / 2)

    def _spawn_asteroids(self) -> None:
        rng = self.rng
        count = min(self.level + config.MIN_ASTEROIDS, config.MAX_ASTEROIDS)
        for _ in range(count):
            radius = rng.randint(config.ASTEROID_RADIUS_MIN, config.ASTEROID_RADIUS_MAX)
            side = _Side(rng.randrange(4))
            if side is _Side.TOP:
                x = rng.randrange(self.width) + radius
                y = radius + GRACE_SPACING
            elif side is _Side.RIGHT:
                x = self.width - radius - GRACE_SPACING
                y = rng.randrange(self.height - 2 * radius) + radius
            elif side is _Side.BOTTOM:
                x = rng.randrange(self.width - 2 * radius) + radius
                y = self.height - radius - GRACE_SPACING
            else:
                x = radius + GRACE_SPACING
                y = rng.randrange(self.height - 2 * radius) + radius
            dx = rng.randint(config.ASTEROID_SPEED_MIN, config.ASTEROID_SPEED_MAX)
            dy = rng.randint(config.ASTEROID_SPEED_MIN, config.ASTEROID_SPEED_MAX)
            self.asteroids.append(
                Asteroid(x=float(x), y=float(y), radius=float(radius), dx=float(dx), dy=float(dy))
            )

    def _move_player(self) -> None:
        player = self.player
        if player.direction_state is DirectionState.CLOCKWISE:
            player.direction = (player.direction + config.ROTATION_SPEED) % 360
        elif player.direction_state is DirectionState.COUNTER_CLOCKWISE:
            player.direction = (player.direction + 360 - config.ROTATION_SPEED) % 360

        accel = player.acceleration_state
        if accel is AccelerationState.ACCELERATING and player.velocity < config.MAX_SPEED:
            player.velocity = min(player.velocity + config.SPEED_ACCEL, config.MAX_SPEED)
        elif accel is AccelerationState.DECELERATING and player.velocity > config.MIN_SPEED:
            player.velocity = max(player.velocity - config.SPEED_ACCEL, config.MIN_SPEED)

        hx, hy = _heading(player.direction)
        new_x = player.x + hx * player.velocity
        new_y = player.y + hy * player.velocity
        if 0 <= new_x <= self.width:
            player.x = new_x
        if 0 <= new_y <= self.height:
            player.y = new_y

    def _move_bullets(self) -> None:
        for bullet in self.bullets:
            bullet.x += bullet.dx
            bullet.y += bullet.dy
        self.bullets = [
            b for b in self.bullets if 0 < b.x < self.width and 0 < b.y < self.height
        ]

    def _move_asteroids(self) -> None:
        for asteroid in self.asteroids:
            asteroid.x += asteroid.dx
            asteroid.y += asteroid.dy
            asteroid.x, flip_x = _pull_inside(asteroid.x, asteroid.radius, self.width)
            asteroid.y, flip_y = _pull_inside(asteroid.y, asteroid.radius, self.height)
            if flip_x:
                asteroid.dx = -asteroid.dx
            if flip_y:
                asteroid.dy = -asteroid.dy

    def _handle_collisions(self) -> None:
        if self._resolve_hits():
            for a1, a2 in itertools.combinations(self.asteroids, 2):
                _bounce(a1, a2)

    def _resolve_hits(self) -> bool:
        """Handle ship and bullet hits; False when the ship was destroyed."""
        player = self.player
        ship_reach = config.SHIP_RADIUS * 0.80
        pending = deque(self.asteroids)
        kept: list[Asteroid] = []
        while pending:
            asteroid = pending.popleft()
            if _touching(player.x, player.y, asteroid.x, asteroid.y, asteroid.radius + ship_reach):
                self.state = GameState.GAME_OVER
                self.asteroids = [*kept, asteroid, *pending]
                return False
            reach = asteroid.radius + config.BULLET_RADIUS
            hit = next(
                (
                    index
                    for index, bullet in enumerate(self.bullets)
                    if _touching(bullet.x, bullet.y, asteroid.x, asteroid.y, reach)
                ),
                None,
            )
            if hit is None:
                kept.append(asteroid)
                continue
            del self.bullets[hit]
            if asteroid.radius >= config.ASTEROID_SPLIT_THRESHOLD:
                kept.extend(_split(asteroid))
        self.asteroids = kept
        return True