[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noripath"
version = "0.1.0"
description = "Rendering building blocks: typed properties, an object registry, colors, rays, bounding boxes, transforms, reconstruction filters, shading frames, an arcball controller, viewer display modes and a Bunch-Kaufman LDLT solver"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["rendering", "ray tracing", "bounding box", "reconstruction filter", "arcball", "ldlt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["noripath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
