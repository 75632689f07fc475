[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stamfluid"
version = "0.1.0"
description = "Spectral stable-fluids solver on a periodic 2D grid with terminal rendering and binary frame output"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["fluid", "simulation", "stable fluids", "fft", "navier-stokes", "kelvin-helmholtz"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stamfluid-kelvin-helmholtz = "stamfluid.kelvin_helmholtz:main"
stamfluid-viscosity = "stamfluid.viscosity_investigation:main"

[tool.hatch.build.targets.wheel]
packages = ["stamfluid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
