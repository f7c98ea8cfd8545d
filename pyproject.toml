[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacesim"
version = "1.0.0"
description = "Hour-by-hour simulation of spaceships travelling between planets with their own calendars"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "space", "planets", "spaceship", "calendar"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest", "freezegun"]

[project.scripts]
spacesim = "spacesim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["spacesim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
