[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cantina"
version = "0.1.0"
description = "A two-player arcade hub: walk around a space cantina and challenge each other at snake, rhythm, ship shooting and duck fishing mini-games."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "snake", "rhythm", "mini-games", "two-player"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
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
cantina = "cantina.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["cantina"]

[tool.pytest.ini_options]
addopts = "-ra"
