[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "restic"
version = "0.1.0"
description = "Building blocks for a backup tool: authenticated encryption, encrypted streams, path filters and console helpers"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "backup",
    "encryption",
    "poly1305",
    "aes-ctr",
    "scrypt",
    "glob",
    "filter",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Backup",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["restic"]

[tool.hatch.build.targets.sdist]
include = [
    "restic",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
