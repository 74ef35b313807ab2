[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "specfun"
version = "0.1.0"
description = "Special functions, distributions and small numerical tools"
requires-python = ">=3.10"
dependencies = [
    "scipy",
]
keywords = [
    "bessel",
    "special functions",
    "logarithm",
    "error function",
    "normal distribution",
    "kolmogorov-smirnov",
    "levinson-durbin",
    "random numbers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["specfun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
