[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jobrunner"
version = "0.1.0"
description = "A terminal menu for running shell jobs defined in a YAML file"
requires-python = ">=3.10"
keywords = ["terminal", "menu", "shell", "jobs", "yaml", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jobrunner = "jobrunner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["jobrunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
