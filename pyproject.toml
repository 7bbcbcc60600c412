[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "torusview"
version = "0.1.0"
description = "Interactive shaded 3D torus viewer with rotation, zoom and adjustable radii"
requires-python = ">=3.10"
dependencies = []
keywords = ["torus", "3d", "rendering", "visualization", "tkinter", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
torusview = "torusview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["torusview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
