[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "femkit"
version = "0.1.0"
description = "Finite element building blocks: quadrature rules, Jacobians, integration point data and an L2 projection boundary statement"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["finite elements", "fem", "quadrature", "cubature", "jacobian"]
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["femkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
