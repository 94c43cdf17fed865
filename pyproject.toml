[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubparse"
version = "0.1.0"
description = "Reader for .cub scene description files used by raycasting games"
requires-python = ">=3.10"
dependencies = []
keywords = ["cub3d", "raycasting", "map", "parser", "scene"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubparse = "cubparse.parser:main"

[tool.hatch.build.targets.wheel]
packages = ["cubparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
