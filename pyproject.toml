[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzy_matcher"
version = "0.3.7"
description = "Fuzzy matching of text against patterns, with skim and clangd-style scoring algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy", "match", "text", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fz = "fuzzy_matcher.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fuzzy_matcher"]

[tool.pytest.ini_options]
addopts = "-ra"
