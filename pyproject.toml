[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cbytes"
version = "0.1.0"
description = "C-style character classification, byte-buffer and NUL-terminated string routines"
requires-python = ">=3.10"
dependencies = []
keywords = ["bytes", "strings", "memory", "ctype", "strlcpy", "atoi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cbytes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
