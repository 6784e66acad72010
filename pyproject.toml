[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockworld"
version = "0.1.0"
description = "Voxel world core: chunked block terrain, noise-based generation, meshing, frustum culling and entity physics"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "terrain", "chunks", "noise", "game", "physics", "mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blockworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
