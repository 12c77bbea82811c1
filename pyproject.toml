[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linearkit"
version = "0.1.0"
description = "Resizable and sortable vector containers with traversal, fold and map operations, plus a self-checking suite"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "vector", "data structures", "fold", "map", "traversal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linearkit-suite = "linearkit.suite:main"

[tool.hatch.build.targets.wheel]
packages = ["linearkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
