[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpulink"
version = "0.1.0"
description = "CPU module client that links to memory and kernel over a length-prefixed TCP message protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["sockets", "tcp", "protocol", "client", "operating-systems", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpulink = "cpulink.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpulink"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
