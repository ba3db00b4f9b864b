[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vyprava"
version = "0.1.0"
description = "A text-mode fantasy adventure: pick a class, roll a backstory, fight monsters and spend gold in villages."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "text-adventure", "terminal", "turn-based"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Czech",
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
vyprava = "vyprava.game:main"

[tool.hatch.build.targets.wheel]
packages = ["vyprava"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
