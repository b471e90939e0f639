[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtlab"
version = "0.1.0"
description = "A small path-tracing renderer with a collection of classic data structures and algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "path tracing", "ppm", "b-tree", "red-black tree", "kmp", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rtlab-render = "rtlab.render:main"

[tool.hatch.build.targets.wheel]
packages = ["rtlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
