[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "entiqon"
version = "0.1.0"
description = "Foundational building blocks: exact decimals, structured errors, flexible boolean parsing and ordered collections."
requires-python = ">=3.10"
dependencies = []
keywords = ["decimal", "rational", "errors", "boolean", "parsing", "collection", "utilities"]
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
packages = ["entiqon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
