[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nanotekspice"
version = "0.1.0"
description = "Tristate digital logic simulator with elementary gates and 4000-series CMOS chips"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "simulator", "tristate", "digital", "circuit", "cmos", "4000-series"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nanotekspice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
