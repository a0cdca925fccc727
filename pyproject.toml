[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gradebook"
version = "0.1.0"
description = "Read student records and report final grades for undergraduate and graduate students"
requires-python = ">=3.10"
dependencies = []
keywords = ["grades", "students", "median", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
gradebook = "gradebook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gradebook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
