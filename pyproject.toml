[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rsbench"
version = "13.0.0"
description = "Multipole resonance cross-section lookup benchmark for Monte Carlo neutron transport"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "neutron transport", "cross section", "multipole", "monte carlo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rsbench = "rsbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rsbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
