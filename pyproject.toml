[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mightydoom"
version = "0.1.0"
description = "A small top-down arena shooter: clear each room of zombies, then walk through the portal."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "zombies", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
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
mightydoom = "mightydoom.main:main"

[tool.hatch.build.targets.wheel]
packages = ["mightydoom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
