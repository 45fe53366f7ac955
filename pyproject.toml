[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridpathing"
version = "0.1.0"
description = "A* pathfinding on ASCII grid maps with agents that follow paths, plus an interactive pygame demo."
requires-python = ">=3.10"
keywords = ["pathfinding", "a-star", "grid", "navigation", "game-ai", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridpathing = "gridpathing.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gridpathing"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
