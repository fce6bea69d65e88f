[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kubevirt-api"
version = "0.1.0"
description = "Typed Python models for virtual machine, migration, KubeVirt and snapshot API objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "virtualization", "virtual-machine", "api", "models", "snapshot"]
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
packages = ["kubevirt_api"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
