[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "dockgrid"
version = "0.1.0"
description = "Interpolated affinity grids, pose bookkeeping and conformation helpers for ligand docking"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["docking", "molecular", "grid", "affinity", "rmsd", "quaternion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.setuptools.packages.find]
include = ["dockgrid*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
