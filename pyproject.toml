[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hmcl-launcher"
version = "3.5.0"
description = "Locate a suitable Java runtime on Windows and start the HMCL launcher jar with it"
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "java", "launcher", "jvm", "windows"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hmcl-launcher = "hmcl_launcher.launcher:main"

[tool.hatch.build.targets.wheel]
packages = ["hmcl_launcher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
