[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "questkit"
version = "0.1.0"
description = "Quest criteria, progress tracking and update dispatch for game servers"
requires-python = ">=3.10"
dependencies = []
keywords = ["quest", "task", "criteria", "progress", "game"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["questkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
