[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zonescan"
version = "0.1.0"
description = "Lexical scanner and RDATA field parsers for DNS zone files in presentation format"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "zone", "zonefile", "rdata", "parser", "scanner"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zonescan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
