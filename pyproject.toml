[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asteroids"
version = "0.1.0"
description = "A small Asteroids arcade game with bouncing, splitting asteroids"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["asteroids", "arcade", "game", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
asteroids = "asteroids.app:main"

[tool.hatch.build.targets.wheel]
packages = ["asteroids"]

[tool.pytest.ini_options]
addopts = "-ra"
