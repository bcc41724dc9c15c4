[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "univm"
version = "0.1.0"
description = "An interpreter for the fourteen-instruction Universal Machine with segmented memory"
requires-python = ">=3.10"
dependencies = []
keywords = ["universal machine", "virtual machine", "emulator", "interpreter", "um"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
univm = "univm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["univm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
