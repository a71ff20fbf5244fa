[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "packfile"
version = "0.1.0"
description = "Pack the files matched by a pattern into a single indexed archive, list it and unpack it again"
requires-python = ">=3.10"
dependencies = []
keywords = ["archive", "pack", "unpack", "bundle", "files"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Packaging",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
packfile = "packfile.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["packfile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
