[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fwnt"
version = "0.1.0"
description = "Building blocks for Windows NT data formats: LCID language tag lookup and Huffman bit-stream decoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["windows", "nt", "lcid", "locale", "huffman", "bit-stream", "forensics"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fwnt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
