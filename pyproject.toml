[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "s5kit"
version = "0.1.0"
description = "Building blocks for object-storage transfer tools: sync decisions, warning errors, argument validation, structured logging and operation statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["s3", "sync", "validation", "logging", "statistics"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["s5kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
