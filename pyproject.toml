[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ndndissect"
version = "0.1.0"
description = "Dissect NDN TLV packets and print them as an indented tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["ndn", "named-data-networking", "tlv", "dissector", "packet"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
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
ndn-dissect = "ndndissect.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ndndissect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
