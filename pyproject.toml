[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datacraft"
version = "0.1.0"
description = "Generate records of test data from a JSON field specification"
requires-python = ">=3.10"
dependencies = []
keywords = ["test data", "data generation", "fixtures", "synthetic data"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datacraft = "datacraft.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["datacraft"]

[tool.pytest.ini_options]
addopts = "-ra"
