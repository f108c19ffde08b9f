[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "errkit"
version = "0.1.0"
description = "Uniform error reporting and strict numeric argument parsing for command-line programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["errors", "errno", "command-line", "argument parsing", "diagnostics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: POSIX",
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

[project.scripts]
errkit-demo = "errkit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["errkit"]

[tool.pytest.ini_options]
addopts = "-ra"
