"""Tunable settings for the game window, ship, bullets and asteroids."""

WIDTH = 800
"""Initial width of the window."""
HEIGHT = 600
"""Initial height of the window."""
BG_COLOR = (0.0, 0.0, 0.0)
"""Background colour as an (r, g, b) tuple of floats in [0, 1]."""
LINE_COLOR = (1.0, 1.0, 1.0)
"""Line colour as an (r, g, b) tuple of floats in [0, 1]."""
FPS = 60
"""Maximum number of frames per second."""

SHIP_RADIUS = 30
"""Radius of the ship."""
MAX_SPEED = 5
"""Maximum speed of the ship."""
MIN_SPEED = 0
"""Minimum speed of the ship; a negative value allows moving backwards."""
SPEED_ACCEL = 0.1
"""Speed change per frame while accelerating or decelerating."""
ROTATION_SPEED = 6
"""Degrees turned per frame while rotating."""

MAX_BULLETS = 30
"""Maximum number of bullets on screen at any time."""
BULLET_VELOCITY = 10
"""Speed of a bullet."""
BULLET_RADIUS = 5
"""Radius of a bullet."""

MIN_ASTEROIDS = 1
"""Base number of asteroids added to the level number when spawning."""
MAX_ASTEROIDS = 10
"""Maximum number of asteroids spawned for any level."""
ASTEROID_RADIUS_MIN = 10
"""Smallest radius of a spawned asteroid."""
ASTEROID_SPLIT_THRESHOLD = 25
"""Asteroids at least this large split in two when shot."""
ASTEROID_RADIUS_MAX = 30
"""Largest radius of a spawned asteroid."""
ASTEROID_SPEED_MIN = 1
"""Smallest per-axis speed of a spawned asteroid."""
ASTEROID_SPEED_MAX = 3
"""Largest per-axis speed of a spawned asteroid."""