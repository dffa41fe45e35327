[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "minirt"
version = "0.1.0"
description = "Ray tracer core: vector math, ray/shape intersection, a scene model and a scene file parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "geometry", "intersection", "scene", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["minirt*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
