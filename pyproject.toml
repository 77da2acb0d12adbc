[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ekit"
version = "0.1.0"
description = "Generic helpers for sequences, thread-safe containers, priority and delay queues, and JSON or encrypted database column values."
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "utilities",
    "collections",
    "priority-queue",
    "delay-queue",
    "set-operations",
    "concurrency",
    "aes-gcm",
]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ekit"]

[tool.hatch.build.targets.sdist]
include = [
    "ekit",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
