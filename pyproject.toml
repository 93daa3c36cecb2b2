[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cortexgeom"
version = "0.8.8"
description = "2D geometry for computer vision: points, paths, splines, path simplification and smoothing, triangle rasterization"
requires-python = ">=3.10"
dependencies = []
keywords = ["computer-vision", "computer-graphics", "geometry", "path", "spline", "svg", "rasterization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cortexgeom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
