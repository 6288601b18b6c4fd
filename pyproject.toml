[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "aieprng"
version = "0.1.0"
description = "Software models of four-lane vectorised SFMT, xoroshiro128++ and XORWOW generators and the stream transfers around them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "prng",
    "random",
    "sfmt",
    "mersenne-twister",
    "xoroshiro128",
    "xorwow",
    "simd",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = ["pytest"]

[project.scripts]
aieprng = "aieprng.host:main"

[tool.setuptools]
packages = ["aieprng"]

[tool.pytest.ini_options]
addopts = "-ra"
