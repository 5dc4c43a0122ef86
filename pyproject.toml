[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "openixcard"
version = "1.0.0"
description = "Building blocks for Allwinner IMAGEWTY firmware tools: RC6 and Twofish ciphers, disk-image helpers and console messages"
requires-python = ">=3.10"
keywords = ["allwinner", "imagewty", "firmware", "rc6", "twofish", "disk-image"]
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
    "Topic :: System :: Archiving :: Packaging",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["openixcard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
