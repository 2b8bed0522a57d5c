[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "innoread"
version = "0.1.0"
description = "Readers for the structures found inside Inno Setup installer executables"
requires-python = ">=3.10"
dependencies = []
keywords = ["innosetup", "installer", "setup", "parser", "windows"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["innoread"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
