[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "permgroups"
version = "0.1.2"
description = "Permutation groups: orbits, transversals, Schreier vectors and random group elements"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "permutation",
    "group theory",
    "orbit",
    "transversal",
    "schreier vector",
    "product replacement",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["permgroups"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
