[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iron_oxide"
version = "0.1.0"
description = "Small building blocks: fixed-length vectors, float matrices and 3D grids, byte readers and writers, colour values, and minimal HTTP and WebSocket helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "vector", "bytes", "binary", "http", "websocket", "color"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iron_oxide"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
