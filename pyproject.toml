[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monsterbattle"
version = "0.1.0"
description = "A console gem-matching monster battle game, with a few small console exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "match-three", "console", "monster", "battle"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
monsterbattle = "monsterbattle.battle:main"
monsterbattle-guess = "monsterbattle.guessing:main"
monsterbattle-scores = "monsterbattle.scores:main"
monsterbattle-shopping = "monsterbattle.shopping:main"

[tool.hatch.build.targets.wheel]
packages = ["monsterbattle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
