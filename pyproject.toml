[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trdscl"
version = "1.0.0"
description = "Build ZX Spectrum TR-DOS disk images (.trd) and SCL archives (.scl) from plain files"
requires-python = ">=3.10"
dependencies = []
keywords = ["zx-spectrum", "tr-dos", "trd", "scl", "disk-image", "retro"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
maketrd = "trdscl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["trdscl"]

[tool.pytest.ini_options]
addopts = "-ra"
