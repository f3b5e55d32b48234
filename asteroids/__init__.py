"""An Asteroids arcade game: ship, bullets and splitting, bouncing asteroids."""

__version__ = "0.1.0"