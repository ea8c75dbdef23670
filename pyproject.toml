[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enipscan"
version = "0.1.0"
description = "CIP data types, EPATH and Message Router encoding, Forward Open payloads, and the Identity and Parameter objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["cip", "ethernet-ip", "enip", "industrial", "plc", "fieldbus"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enipscan"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
