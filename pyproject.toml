[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "urna"
version = "0.1.0"
description = "Console registry of Brazilian federative units (UFs) stored in a fixed-slot binary file"
requires-python = ">=3.10"
dependencies = []
keywords = ["uf", "registry", "console", "election", "binary-file"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
urna = "urna.console:main"
urna-quicklist = "urna.quicklist:main"

[tool.hatch.build.targets.wheel]
packages = ["urna"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
