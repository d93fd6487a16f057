[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polypanda"
version = "0.1.0"
description = "Exact integer polyhedral computations: Fourier-Motzkin elimination, symmetry classes and facet rotation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "polytope",
    "polyhedron",
    "fourier-motzkin",
    "facet enumeration",
    "symmetry",
    "big integer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polypanda"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
