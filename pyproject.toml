[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monadkit"
version = "0.1.0"
description = "Small functional containers: Either, N-way unions, IO wrappers, a do block and chainable Futures."
requires-python = ">=3.10"
dependencies = []
keywords = ["either", "monad", "functional", "future", "union", "tagged-union"]
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
packages = ["monadkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
