[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcukit"
version = "0.1.0"
description = "Signal generators, running statistics, small data structures, an XML writer and I2C peripheral drivers in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "i2c",
    "embedded",
    "sensors",
    "running-average",
    "running-median",
    "function-generator",
    "ieee754",
    "xml",
    "three-valued-logic",
]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mcukit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
