[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ranim"
version = "0.1.0"
description = "Geometry, bezier and easing utilities for vector animation, plus an example-site builder"
requires-python = ">=3.11"
keywords = ["animation", "bezier", "geometry", "easing", "typst", "svg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "numpy",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ranim-build-examples = "ranim.build_examples:main"

[tool.hatch.build.targets.wheel]
packages = ["ranim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
ignore_missing_imports = true
