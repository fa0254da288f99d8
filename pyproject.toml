[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sfsclient"
version = "1.0.0"
description = "Content model, result codes, error handling, logging and environment helpers for a content download client."
requires-python = ">=3.10"
dependencies = []
keywords = ["sfs", "content", "download", "update", "client", "result", "logging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sfsclient"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
