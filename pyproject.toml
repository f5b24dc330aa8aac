[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unistore"
version = "1.0.0"
description = "UniStore catalogue handling and building blocks for QR-code recognition in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["qr", "qr-code", "thresholding", "perspective", "unistore", "catalogue"]
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
    "Topic :: Scientific/Engineering :: Image Recognition",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unistore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
