[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fnox"
version = "1.13.0"
description = "Secret management helpers: provider authentication prompts and command-line ordering checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["secrets", "authentication", "cli", "ordering"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fnox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
