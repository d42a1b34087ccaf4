[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "q3logcatcher"
version = "0.1.0"
description = "Collect Quake 3 match kill logs from a log file or a Docker container and store them in MongoDB."
requires-python = ">=3.10"
keywords = ["quake3", "logs", "mongodb", "docker", "game-server"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pymongo",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
q3logcatcher = "q3logcatcher.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["q3logcatcher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
