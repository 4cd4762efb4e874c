[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gcpprovider"
version = "0.1.0"
description = "Typed API objects, encoding, lookups, controller configuration loading and secret validation for a GCP infrastructure provider extension"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["gcp", "kubernetes", "infrastructure", "configuration", "yaml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gcpprovider"]

[tool.hatch.build.targets.sdist]
include = ["gcpprovider", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
