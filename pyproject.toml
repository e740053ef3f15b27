[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "medialog"
version = "0.1.0"
description = "Keep a personal list of movies, books, albums and shows in a CSV file, from an interactive terminal menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["media", "library", "csv", "catalogue", "movies", "books", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
medialog = "medialog.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["medialog"]

[tool.pytest.ini_options]
addopts = "-ra"
