[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cui-rpg"
version = "0.1.0"
description = "A small turn-based console role-playing battle between a hero and a forest monster"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "game", "console", "turn-based", "battle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cui-rpg = "cui_rpg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cui_rpg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
