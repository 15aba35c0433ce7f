[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelgames"
version = "0.1.0"
description = "Small frame-buffer games and simulations: Conway's Game of Life, a bouncing box and a Space Invaders clone."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "game-of-life", "space-invaders", "framebuffer", "pixels", "pcx", "pcg32", "bresenham"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pixelgames"]

[tool.hatch.build.targets.sdist]
include = ["pixelgames", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
