[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evmcore"
version = "0.1.0"
description = "Building blocks of an EVM interpreter: 256-bit word arithmetic, opcode names, opcode info and analysis entries, memory and stack."
requires-python = ">=3.10"
dependencies = []
keywords = ["evm", "ethereum", "interpreter", "bytecode", "u256", "stack machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["evmcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
