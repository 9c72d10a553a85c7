[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "obview"
version = "0.1.0"
description = "Support library for a PCB layout viewer: configuration files, file history, annotations and hull geometry"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["pcb", "boardview", "eda", "configuration", "annotations", "convex-hull"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["obview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
