[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ubica"
version = "0.1.0"
description = "A small 2D game engine toolkit built on pygame: sprites, animations, particles, health bars, timers and a bordered world."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "pygame", "2d", "animation", "particles", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ubica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
