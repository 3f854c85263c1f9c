[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tdmm"
version = "0.1.0"
description = "A simulated heap allocator with first, best, worst and buddy fit strategies and a mark-and-sweep collector"
requires-python = ">=3.10"
dependencies = []
keywords = ["allocator", "malloc", "heap", "garbage-collection", "buddy-allocator", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tdmm = "tdmm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tdmm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
