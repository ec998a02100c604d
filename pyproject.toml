[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bikerental"
version = "1.0.0"
description = "A small bike rental system driven by a menu-coded command file"
requires-python = ">=3.10"
dependencies = []
keywords = ["bike", "rental", "membership", "command file"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bikerental = "bikerental.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bikerental"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
