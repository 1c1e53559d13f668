[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailysolve"
version = "0.1.0"
description = "Solutions to short competitive-programming practice problems, usable as functions or from the command line."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "practice", "puzzles", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dailysolve = "dailysolve.problems:main"

[tool.hatch.build.targets.wheel]
packages = ["dailysolve"]

[tool.pytest.ini_options]
addopts = "-ra"
