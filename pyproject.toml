[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdfdraw"
version = "0.1.0"
description = "Build PDF page content-stream operations from positions, shapes, lines, colours and transformation matrices."
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "graphics", "content-stream", "vector", "drawing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pdfdraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
