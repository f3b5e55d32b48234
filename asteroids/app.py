"""Window, input handling and drawing for the asteroids game."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator
from enum import Enum, IntEnum, auto

import pygame

from asteroids import config
from asteroids.game import (
    AccelerationState,
    DirectionState,
    Game,
    GameState,
    Player,
)

_SIN_135 = 0.7071067
_COS_135 = -0.7071067

_FONT_SIZE = 50
_DEFAULT_FONT = "./font/AzeretMono.ttf"
_TITLE = "Asteroids Game"


def _rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    r, g, b = color
    return round(r * 255), round(g * 255), round(b * 255)


_BACKGROUND = _rgb(config.BG_COLOR)
_LINE = _rgb(config.LINE_COLOR)
_PAUSED_LINE = _rgb((0.5, 0.5, 0.5))
_TEXT = (255, 255, 255)
_PAUSED_TEXT = (177, 177, 177)

_QUIT_KEYS = frozenset({pygame.K_RETURN, pygame.K_q})


class ShipVertex(IntEnum):
    """Corners of the ship's outline."""

    BOW = 0
    STARBOARD = 1
    PORT = 2
    AFT = 3


_SHIP_TRIANGLES = (
    (ShipVertex.BOW, ShipVertex.STARBOARD, ShipVertex.AFT),
    (ShipVertex.BOW, ShipVertex.PORT, ShipVertex.AFT),
)


class AppResult(Enum):
    """What the main loop should do after handling an event or a frame."""

    CONTINUE = auto()
    SUCCESS = auto()
    FAILURE = auto()


def ship_vertices(player: Player) -> dict[ShipVertex, tuple[float, float]]:
    """Corner positions of the ship drawn as an arrowhead inscribed in its circle.

    The aft corner sits at the ship's position and the bow points along its direction.
    """
    rad = math.radians(player.direction % 360)
    sin_dir = math.sin(rad)
    cos_dir = math.cos(rad)
    r = config.SHIP_RADIUS
    x, y = player.x, player.y
    return {
        ShipVertex.BOW: (x + sin_dir * r, y - cos_dir * r),
        ShipVertex.STARBOARD: (
            x + (sin_dir * _COS_135 + cos_dir * _SIN_135) * r,
            y - (cos_dir * _COS_135 - sin_dir * _SIN_135) * r,
        ),
        ShipVertex.PORT: (
            x + (sin_dir * _COS_135 - cos_dir * _SIN_135) * r,
            y - (cos_dir * _COS_135 + sin_dir * _SIN_135) * r,
        ),
        ShipVertex.AFT: (x, y),
    }


def circle_points(x0: float, y0: float, radius: float) -> Iterator[tuple[int, int]]:
    """Pixels of a circle outline, by the midpoint circle algorithm."""
    x0 = int(x0)
    y0 = int(y0)
    radius = int(radius)
    x = radius - 1
    y = 0
    dx = 1
    dy = 1
    err = dx - (radius << 1)
    while x >= y:
        yield x0 + x, y0 + y
        yield x0 + y, y0 + x
        yield x0 - y, y0 + x
        yield x0 - x, y0 + y
        yield x0 - x, y0 - y
        yield x0 - y, y0 - x
        yield x0 + y, y0 - x
        yield x0 + x, y0 - y
        if err <= 0:
            y += 1
            err += dy
            dy += 2
        if err > 0:
            x -= 1
            dx += 2
            err += dx - (radius << 1)


class App:
    """Ties a game to a drawing surface, keyboard input and text rendering."""

    def __init__(
        self,
        game: Game | None = None,
        surface: pygame.Surface | None = None,
        font: pygame.font.Font | None = None,
    ) -> None:
        self.game = game if game is not None else Game()
        self.surface = surface
        self.font = font

    def handle_event(self, event: pygame.event.Event) -> AppResult:
        """React to one window or keyboard event."""
        game = self.game
        player = game.player
        if event.type == pygame.VIDEORESIZE:
            game.resize(event.w, event.h)
            return AppResult.CONTINUE
        if event.type == pygame.QUIT:
            return AppResult.SUCCESS

        if event.type == pygame.KEYDOWN:
            if game.state in (GameState.MENU, GameState.GAME_OVER, GameState.PAUSE):
                if event.key in _QUIT_KEYS:
                    return AppResult.SUCCESS
                if game.state is GameState.GAME_OVER:
                    game.reset()
                game.state = GameState.PLAY
                return AppResult.CONTINUE
            key = event.key
            if key == pygame.K_LEFT:
                player.direction_state = DirectionState.COUNTER_CLOCKWISE
            elif key == pygame.K_RIGHT:
                player.direction_state = DirectionState.CLOCKWISE
            elif key == pygame.K_UP:
                player.acceleration_state = AccelerationState.ACCELERATING
            elif key == pygame.K_DOWN:
                player.acceleration_state = AccelerationState.DECELERATING
            elif key == pygame.K_SPACE:
                game.shoot()
            elif key == pygame.K_p:
                game.state = GameState.PAUSE
            elif key in _QUIT_KEYS:
                return AppResult.SUCCESS

        elif event.type == pygame.KEYUP:
            if event.key in (pygame.K_LEFT, pygame.K_RIGHT):
                player.direction_state = DirectionState.STILL
            elif event.key in (pygame.K_UP, pygame.K_DOWN):
                player.acceleration_state = AccelerationState.CONSTANT

        return AppResult.CONTINUE

    def iterate(self) -> AppResult:
        """Advance the game if it is running and draw the current frame."""
        game = self.game
        surface = self.surface
        if surface is None:
            return AppResult.FAILURE
        surface.fill(_BACKGROUND)

        if game.state is GameState.MENU:
            self._show_title("Asteroids", "Click any key to start")
            return AppResult.CONTINUE
        if game.state is GameState.GAME_OVER:
            self._show_title("Game Over", "Click any key to restart")
            return AppResult.CONTINUE

        if game.state is GameState.PLAY:
            game.update_frame()
        color = _PAUSED_LINE if game.state is GameState.PAUSE else _LINE

        self._show_scoreboard()

        corners = ship_vertices(game.player)
        for triangle in _SHIP_TRIANGLES:
            pygame.draw.polygon(surface, color, [corners[v] for v in triangle])

        for bullet in game.bullets:
            self._draw_circle(bullet.x, bullet.y, config.BULLET_RADIUS, color)
        for asteroid in game.asteroids:
            self._draw_circle(asteroid.x, asteroid.y, asteroid.radius, color)

        return AppResult.CONTINUE

    def run(self) -> AppResult:
        """Process events and frames until the player quits."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                result = self.handle_event(event)
                if result is not AppResult.CONTINUE:
                    return result
            result = self.iterate()
            if result is not AppResult.CONTINUE:
                return result
            pygame.display.flip()
            clock.tick(config.FPS)

    def _draw_circle(
        self, x: float, y: float, radius: float, color: tuple[int, int, int]
    ) -> None:
        surface = self.surface
        bounds = surface.get_rect()
        for point in circle_points(x, y, radius):
            if bounds.collidepoint(point):
                surface.set_at(point, color)

    def _render_text(
        self, text: str, color: tuple[int, int, int], shrink: int
    ) -> pygame.Surface | None:
        if self.font is None:
            return None
        rendered = self.font.render(text, False, color)
        if shrink == 0:
            return rendered
        width, height = rendered.get_size()
        return pygame.transform.scale(rendered, (width >> shrink, height >> shrink))

    def _show_title(self, title: str, hint: str) -> None:
        width, height = self.game.width, self.game.height
        heading = self._render_text(title, _TEXT, 0)
        if heading is None:
            return
        self.surface.blit(heading, ((width - heading.get_width()) / 2, height / 3))
        subtitle = self._render_text(hint, _TEXT, 1)
        if subtitle is None:
            return
        self.surface.blit(subtitle, ((width - subtitle.get_width()) / 2, height / 2))

    def _show_scoreboard(self) -> None:
        color = _PAUSED_TEXT if self.game.state is GameState.PAUSE else _TEXT
        score = self._render_text(f"Level: {self.game.level}", color, 2)
        if score is not None:
            self.surface.blit(score, (10, 10))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until the player quits."""
    parser = argparse.ArgumentParser(prog="asteroids", description="Asteroids arcade game.")
    parser.add_argument("--font", default=_DEFAULT_FONT, help="TrueType font for on-screen text")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        pygame.display.set_caption(_TITLE)
        game = Game()
        try:
            surface = pygame.display.set_mode((game.width, game.height), pygame.RESIZABLE)
        except pygame.error as exc:
            print(f"Unable to create window: {exc}", file=sys.stderr)
            return 1
        try:
            font = pygame.font.Font(args.font, _FONT_SIZE)
        except (OSError, pygame.error) as exc:
            print(f"Couldn't load font: {exc}", file=sys.stderr)
            return 1
        result = App(game, surface, font).run()
        return 0 if result is AppResult.SUCCESS else 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())