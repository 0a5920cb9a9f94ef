[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "funcplot"
version = "0.1.0"
description = "Validate a one-variable math expression and draw its graph as text in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["plot", "graph", "expression", "shunting-yard", "rpn", "terminal", "ascii"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
funcplot = "funcplot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["funcplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
