[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fildefer"
version = "0.1.0"
description = "Wireframe viewer for heightmap files with a rotating, zoomable projection"
requires-python = ">=3.10"
keywords = ["wireframe", "heightmap", "fdf", "projection", "bresenham", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Graphics :: Viewers",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fildefer = "fildefer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fildefer"]

[tool.pytest.ini_options]
addopts = "-ra"
