"""2D geometry for computer vision: points, paths, splines, statistics and rasterization."""

__version__ = "0.8.8"

__all__ = [
    "arc",
    "compound",
    "paths",
    "pathutil",
    "point",
    "rasterizer",
    "reduce",
    "simplify",
    "smooth",
    "spline",
    "statistic",
    "walker",
]