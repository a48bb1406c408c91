[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bankcli"
version = "0.1.0"
description = "Interactive terminal tool for registering bank accounts in flat CSV files"
requires-python = ">=3.10"
keywords = ["bank", "accounts", "cli", "csv", "registration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankcli = "bankcli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bankcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
