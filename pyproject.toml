[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floodconsequences"
version = "0.1.0"
description = "Flood consequence modelling: hazard events, consequence results, crop damage functions, critical infrastructure and indirect economic impacts"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "flood",
    "hydrology",
    "consequences",
    "damage",
    "hazard",
    "agriculture",
    "crop damage",
    "critical infrastructure",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Hydrology",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["floodconsequences"]

[tool.hatch.build.targets.sdist]
include = ["floodconsequences", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
