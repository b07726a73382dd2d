[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "litchhunt"
version = "1.0.0"
description = "A small text-mode dungeon crawl: find and defeat the litch to recover the ritual stone."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text adventure", "dungeon", "roguelike", "terminal"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
litchhunt = "litchhunt.game:main"

[tool.hatch.build.targets.wheel]
packages = ["litchhunt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
