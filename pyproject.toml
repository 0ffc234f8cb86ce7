[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cslib"
version = "0.1.0"
description = "Helpers for teaching programs: grids, hash maps, lexicons, geometry value types, colors, random numbers and console input."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "grid", "lexicon", "hashmap", "dawg", "geometry", "colors", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cslib"]

[tool.pytest.ini_options]
addopts = "-ra"
