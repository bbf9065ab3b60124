[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "okinawa"
version = "0.1.0"
description = "Core of a small 3D engine: vector math, rotations, a scene graph, a camera, textures and Wavefront OBJ import"
requires-python = ">=3.10"
keywords = ["3d", "engine", "scene-graph", "wavefront", "obj", "rotation", "camera", "texture"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["okinawa"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
