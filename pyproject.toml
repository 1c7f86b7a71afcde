[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phpdocbook"
version = "0.1.0"
description = "Reading the PHP manual's DocBook function reference, with building blocks for a terminal viewer."
requires-python = ">=3.10"
keywords = ["php", "documentation", "docbook", "xml", "fuzzy-search"]
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
    "Topic :: Documentation",
    "Topic :: Text Processing :: Markup :: XML",
]
dependencies = [
    "lxml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["phpdocbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
