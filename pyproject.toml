[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "babagrid"
version = "0.1.0"
description = "A grid puzzle engine where words placed on the board form the rules of play"
requires-python = ">=3.10"
keywords = ["puzzle", "game", "grid", "rules", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
babagrid = "babagrid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["babagrid"]

[tool.pytest.ini_options]
addopts = "-ra"
