[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feedline"
version = "0.1.0"
description = "Make sure there is an empty line at the end of the files provided"
requires-python = ">=3.10"
dependencies = []
keywords = ["newline", "eof", "formatting", "cli", "files"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
feedline = "feedline.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["feedline"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
