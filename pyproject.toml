[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightexplorer"
version = "0.1.0"
description = "Building blocks for a lightweight beacon chain explorer: chain config, chain math, HTML formatting helpers, validator names and page models"
requires-python = ">=3.10"
keywords = ["beacon chain", "ethereum", "explorer", "consensus", "validators"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml>=6.0",
    "requests>=2.28",
    "markupsafe>=2.1",
    "pycryptodome>=3.17",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[tool.hatch.build.targets.wheel]
packages = ["lightexplorer"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
