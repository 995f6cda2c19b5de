[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "invaders_arcade"
version = "1.0.0"
description = "A retro space invaders arcade game with brick barricades, a bonus UFO and a marching fleet."
requires-python = ">=3.10"
keywords = ["game", "arcade", "space invaders", "retro", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
invaders-arcade = "invaders_arcade.app:main"

[tool.hatch.build.targets.wheel]
packages = ["invaders_arcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
