[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsopts"
version = "0.1.0"
description = "Option resolution for a directory-listing tool: command-line values, environment, configuration settings and defaults."
requires-python = ">=3.10"
dependencies = []
keywords = ["ls", "listing", "options", "configuration", "flags", "glob"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lsopts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
