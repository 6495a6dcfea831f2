[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "varknet"
version = "1.12.1"
description = "Container network stack helpers: DHCP proxy paths, lease records, interface addresses and a lease cache"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "networking", "dhcp", "lease"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
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

[tool.hatch.build.targets.wheel]
packages = ["varknet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
