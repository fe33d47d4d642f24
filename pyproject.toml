[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadebox"
version = "1.0.0"
description = "A small arcade with a game menu, Snake and Nibbler, playable in a terminal or a window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["arcade", "snake", "nibbler", "curses", "pygame", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
arcadebox = "arcadebox.app:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
