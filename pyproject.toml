[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridsphere"
version = "0.1.0"
description = "Wireframe spheres over a ground grid with a perspective camera and sphere collision"
requires-python = ">=3.10"
keywords = ["3d", "wireframe", "matrix", "projection", "collision", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridsphere = "gridsphere.scene:main"

[tool.hatch.build.targets.wheel]
packages = ["gridsphere"]

[tool.pytest.ini_options]
addopts = "-ra"
