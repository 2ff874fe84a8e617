[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stakrun"
version = "0.2.12"
description = "Building blocks for a lightweight single-threaded actor runtime: logging levels and filters, a callback queue, returners and reference counts"
requires-python = ">=3.10"
dependencies = []
keywords = ["actor", "runtime", "queue", "logging", "callbacks", "refcount"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stakrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
