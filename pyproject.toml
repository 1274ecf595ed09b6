[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsx"
version = "1.0.0"
description = "A directory lister that shows files in columns with type-based icons and colours"
requires-python = ">=3.10"
keywords = ["ls", "directory", "listing", "icons", "terminal", "cli"]
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
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lsx = "lsx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lsx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
